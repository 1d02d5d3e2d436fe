"""Scalar and byte-string field types of transaction models."""

from typing import Any, ClassVar, SupportsBytes, Type, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    no_info_plain_validator_function,
    to_string_ser_schema,
)

from .conversions import (
    BytesConvertible,
    FixedSizeBytesConvertible,
    NumberConvertible,
    to_bytes,
    to_fixed_size_bytes,
    to_number,
)


class ToStringSchema:
    """
    Mixin that validates a field by calling the type's constructor and serializes it through
    `str()`.
    """

    @staticmethod
    def __get_pydantic_core_schema__(
        source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        return no_info_plain_validator_function(
            source_type,
            serialization=to_string_ser_schema(),
        )


class Number(int, ToStringSchema):
    """
    Non-negative integer field.

    Accepts integers, decimal or `0x`-prefixed strings and big-endian bytes. An empty string
    or empty byte string is zero.
    """

    def __new__(cls, value: NumberConvertible):
        return super(Number, cls).__new__(cls, to_number(value))

    def __str__(self) -> str:
        return str(int(self))

    def hex(self) -> str:
        """Return the `0x`-prefixed hexadecimal form."""
        return hex(self)


class HexNumber(Number):
    """Integer field shown and serialized in hexadecimal, as in JSON transaction objects."""

    def __str__(self) -> str:
        return self.hex()


class Bytes(bytes, ToStringSchema):
    """Variable-length byte string field, such as the transaction data."""

    def __new__(cls, value: BytesConvertible = b""):
        if type(value) is cls:
            return value
        return super(Bytes, cls).__new__(cls, to_bytes(value))

    def __hash__(self) -> int:
        return super(Bytes, self).__hash__()

    def __str__(self) -> str:
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the `0x`-prefixed hexadecimal form."""
        return "0x" + super().hex(*args, **kwargs)


T = TypeVar("T", bound="FixedSizeBytes")


class FixedSizeBytes(Bytes):
    """
    Byte string of an exact length, created with `FixedSizeBytes[length]`.

    Instances compare equal to any string, integer or bytes value that converts to the same
    bytes.
    """

    byte_length: ClassVar[int]
    _sized_: ClassVar[Type["FixedSizeBytes"]]

    def __class_getitem__(cls, length: int) -> Type["FixedSizeBytes"]:
        class Sized(cls):  # type: ignore
            byte_length = length

        Sized._sized_ = Sized
        return Sized

    def __new__(cls, value: FixedSizeBytesConvertible | T):
        if type(value) is cls:
            return value
        return super(FixedSizeBytes, cls).__new__(
            cls, to_fixed_size_bytes(value, cls.byte_length)
        )

    def __hash__(self) -> int:
        return super(FixedSizeBytes, self).__hash__()

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, FixedSizeBytes):
            if not isinstance(other, (str, int, bytes, SupportsBytes)):
                return NotImplemented
            other = self._sized_(other)
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


class Address(FixedSizeBytes[20]):  # type: ignore
    """20-byte account address, used for the recipient and access list entries."""

    pass


class Hash(FixedSizeBytes[32]):  # type: ignore
    """32-byte hash, used for transaction hashes and access list storage keys."""

    pass
