"""RLP serialization mixin for transaction models."""

from typing import Any, ClassVar, List

import rlp as pyrlp

from .base_types import Bytes
from .conversions import int_to_bytes


def to_serializable_element(v: Any) -> Any:
    """Return a serializable element that can be passed to `pyrlp.encode`."""
    if isinstance(v, int):
        return int(v)
    elif isinstance(v, bytes):
        return bytes(v)
    elif isinstance(v, list):
        return [to_serializable_element(v) for v in v]
    elif isinstance(v, RLPSerializable):
        return v.to_list()
    elif v is None:
        return b""
    raise TypeError(f"Unable to serialize element {v} of type {type(v)}.")


def to_raw_element(v: Any) -> Any:
    """
    Return the raw form of an element: unpadded big-endian bytes for numbers and
    nested lists for sequences.
    """
    serializable = to_serializable_element(v)
    if isinstance(serializable, int):
        return int_to_bytes(serializable)
    if isinstance(serializable, list):
        return [to_raw_element(item) for item in serializable]
    return serializable


class RLPSerializable:
    """Class that adds RLP serialization to another class."""

    rlp_fields: ClassVar[List[str]]
    rlp_signing_fields: ClassVar[List[str]]

    def get_rlp_fields(self) -> List[str]:
        """
        Return an ordered list of field names to be included in RLP serialization.

        Function can be overridden to customize the logic to return the fields.

        By default, rlp_fields class variable is used.
        """
        return self.rlp_fields

    def get_rlp_signing_fields(self) -> List[str]:
        """
        Return an ordered list of field names to be included in the RLP serialization of the object
        signature.

        By default, rlp_signing_fields class variable is used.
        """
        return self.rlp_signing_fields

    def get_rlp_prefix(self) -> bytes:
        """
        Return a prefix that has to be prepended to the serialized object.

        By default, an empty string is returned.
        """
        return b""

    def get_rlp_signing_prefix(self) -> bytes:
        """
        Return a prefix that has to be prepended to the serialized signing object.

        By default, an empty string is returned.
        """
        return b""

    def to_list_from_fields(self, fields: List[str]) -> List[Any]:
        """Return an RLP serializable list built from the given attribute names."""
        values_list: List[Any] = []
        for field in fields:
            if not hasattr(self, field):
                raise AttributeError(
                    f'Unable to rlp serialize field "{field}" '
                    f'in object type "{self.__class__.__name__}"'
                )
            values_list.append(to_serializable_element(getattr(self, field)))
        return values_list

    def to_list(self, signing: bool = False) -> List[Any]:
        """
        Return an RLP serializable list that can be passed to `pyrlp.encode`.

        Can be for signing purposes or the entire object.
        """
        if signing:
            return self.to_list_from_fields(self.get_rlp_signing_fields())
        return self.to_list_from_fields(self.get_rlp_fields())

    def rlp_signing_bytes(self) -> Bytes:
        """Return the signing serialized envelope used for signing."""
        return Bytes(self.get_rlp_signing_prefix() + pyrlp.encode(self.to_list(signing=True)))

    def rlp(self) -> Bytes:
        """Return the serialized object."""
        return Bytes(self.get_rlp_prefix() + pyrlp.encode(self.to_list(signing=False)))
