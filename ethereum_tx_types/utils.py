"""Helpers to build transactions from raw values."""

from typing import Any, Dict, List

from ethereum_tx_exceptions import ValidationError


def validate_no_leading_zeroes(values: Dict[str, bytes | None]) -> None:
    """Raise if any of the unpadded numeric values starts with a zero byte."""
    for key, value in values.items():
        if value is not None and len(value) > 0 and value[0] == 0:
            raise ValidationError(
                f"{key} cannot have leading zeroes, received: 0x{bytes(value).hex()}"
            )


def validate_values_array(values: Any, expected_lengths: List[int], tx_name: str) -> None:
    """Check that a raw transaction is a list of one of the expected lengths."""
    if not isinstance(values, (list, tuple)):
        raise ValidationError(f"Invalid serialized tx input. Must be array, got {type(values)}")
    if len(values) not in expected_lengths:
        unsigned, signed = expected_lengths
        raise ValidationError(
            f"Invalid {tx_name} transaction. Only expecting {unsigned} values (for unsigned tx) "
            f"or {signed} values (for signed tx)."
        )


def ceiling_division(a: int, b: int) -> int:
    """Calculate the ceil without using floating point."""
    return -(a // -b)
