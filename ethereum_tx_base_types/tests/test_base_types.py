"""
Test suite for `ethereum_tx_base_types` module base types.
"""

from typing import Any

import pytest

from ..base_types import Address, Bytes, Hash, HexNumber, Number
from ..composite_types import AccessList
from ..conversions import int_to_bytes, to_fixed_size_bytes, to_number

ADDRESS_1 = "0x" + "00" * 19 + "01"


@pytest.mark.parametrize(
    "a, b, equal",
    [
        (Address(0), Address(0), True),
        (Address(0), Address(1), False),
        (Address(1), ADDRESS_1, True),
        (Address(1), 1, True),
        (Address(1), 2, False),
        (Address(1), b"\x00" * 19 + b"\x01", True),
        (ADDRESS_1, Address(1), True),
        (1, Address(1), True),
        (2, Address(1), False),
        (Hash(0), Hash(0), True),
        (Hash(1), Hash(0), False),
        (Hash(1), 1, True),
        (1, Hash(1), True),
        (Address(1), None, False),
    ],
)
def test_comparisons(a: Any, b: Any, equal: bool):
    """
    Test the comparison methods of the fixed size types.
    """
    if equal:
        assert a == b
        assert not a != b
    else:
        assert a != b
        assert not a == b


@pytest.mark.parametrize(
    "input_number, expected",
    [
        pytest.param("", 0, id="empty_string"),
        pytest.param("0x", 0, id="bare_prefix"),
        pytest.param(b"", 0, id="empty_bytes"),
        pytest.param("0x01", 1, id="hex_string"),
        pytest.param("10", 10, id="decimal_string"),
        pytest.param(b"\x01\x00", 256, id="bytes"),
        pytest.param(2**256 - 1, 2**256 - 1, id="max_integer"),
    ],
)
def test_to_number(input_number: Any, expected: int):
    """Test the conversion of the accepted input kinds to numbers."""
    assert to_number(input_number) == expected
    assert Number(input_number) == expected


def test_to_number_invalid():
    """Test that unparsable inputs raise `ValueError`."""
    with pytest.raises(ValueError):
        to_number("0xzz")
    with pytest.raises(ValueError):
        to_number([1, 2])  # type: ignore


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(0, b"", id="zero"),
        pytest.param(1, b"\x01", id="one"),
        pytest.param(256, b"\x01\x00", id="two_bytes"),
        pytest.param(2**64 - 1, b"\xff" * 8, id="max_uint64"),
    ],
)
def test_int_to_bytes(value: int, expected: bytes):
    """Test the unpadded big-endian encoding."""
    assert int_to_bytes(value) == expected


def test_fixed_size_bytes_errors():
    """Test size and sign violations of fixed size conversions."""
    with pytest.raises(ValueError):
        to_fixed_size_bytes(b"\x01" * 21, 20)
    with pytest.raises(ValueError):
        to_fixed_size_bytes(b"\x01", 20)
    with pytest.raises(ValueError):
        to_fixed_size_bytes(-1, 20)


def test_string_representations():
    """Test the string representation of numbers and bytes."""
    assert str(Number(255)) == "255"
    assert str(HexNumber(255)) == "0xff"
    assert str(Bytes("0x0102")) == "0x0102"
    assert Bytes("0x102") == b"\x01\x02"


def test_access_list_model():
    """Test that access list entries accept camel and snake case keys."""
    entry = AccessList.model_validate(
        {"address": ADDRESS_1, "storageKeys": [1, "0x" + "00" * 31 + "02"]}
    )
    assert entry.address == Address(1)
    assert entry.storage_keys == [Hash(1), Hash(2)]
    assert entry.to_list() == [bytes(Address(1)), [bytes(Hash(1)), bytes(Hash(2))]]
    assert entry.model_dump(mode="json", by_alias=True) == {
        "address": ADDRESS_1,
        "storageKeys": ["0x" + "00" * 31 + "01", "0x" + "00" * 31 + "02"],
    }
