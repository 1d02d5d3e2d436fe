"""Common conversion methods."""

from re import sub
from typing import List, SupportsBytes, TypeAlias

BytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int]
FixedSizeBytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int] | int
NumberConvertible: TypeAlias = str | bytes | SupportsBytes | int


def to_bytes(input_bytes: BytesConvertible) -> bytes:
    """Convert multiple types into bytes."""
    if input_bytes is None:
        raise ValueError("Cannot convert `None` input to bytes")

    if (
        isinstance(input_bytes, SupportsBytes)
        or isinstance(input_bytes, bytes)
        or isinstance(input_bytes, list)
    ):
        return bytes(input_bytes)

    if isinstance(input_bytes, str):
        # We can have a hex representation of bytes with spaces for readability
        input_bytes = sub(r"\s+", "", input_bytes)
        if input_bytes.startswith("0x"):
            input_bytes = input_bytes[2:]
        if len(input_bytes) % 2 == 1:
            input_bytes = "0" + input_bytes
        return bytes.fromhex(input_bytes)

    raise ValueError(f"invalid type for `bytes`: {type(input_bytes).__name__}")


def to_fixed_size_bytes(
    input_bytes: FixedSizeBytesConvertible,
    size: int,
) -> bytes:
    """
    Convert multiple types into fixed-size bytes.

    :param input_bytes: The input data to convert.
    :param size: The size of the output bytes. Integers are left-padded with zeros, other inputs
        must have exactly `size` bytes.
    """
    if isinstance(input_bytes, int):
        if input_bytes < 0:
            raise ValueError(f"cannot convert negative value {input_bytes} to fixed size bytes")
        return int.to_bytes(input_bytes, length=size, byteorder="big")
    input_bytes = to_bytes(input_bytes)
    if len(input_bytes) > size:
        raise ValueError(f"input is too large for fixed size bytes: {len(input_bytes)} > {size}")
    if len(input_bytes) < size:
        raise ValueError(f"input is too small for fixed size bytes: {len(input_bytes)} < {size}")
    return input_bytes


def to_number(input_number: NumberConvertible) -> int:
    """
    Convert multiple types into a number.

    Empty strings, a bare `0x` prefix and empty byte strings all convert to zero.
    """
    if isinstance(input_number, int):
        return input_number
    if isinstance(input_number, str):
        stripped = input_number.strip()
        if stripped in ("", "0x"):
            return 0
        return int(stripped, 0)
    if isinstance(input_number, bytes) or isinstance(input_number, SupportsBytes):
        return int.from_bytes(input_number, byteorder="big")
    raise ValueError(f"invalid type for `number`: {type(input_number).__name__}")


def int_to_bytes(value: int) -> bytes:
    """Convert integer to its unpadded big-endian representation."""
    if value == 0:
        return b""

    return int_to_bytes(value // 256) + bytes([value % 256])
