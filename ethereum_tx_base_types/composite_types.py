"""Composite types used by typed transactions."""

from typing import Any, ClassVar, List

from pydantic import model_validator

from .base_types import Address, Hash
from .pydantic import CamelModel
from .serialization import RLPSerializable


class AccessList(CamelModel, RLPSerializable):
    """Access List entry for transactions: an address and the storage keys it touches."""

    address: Address
    storage_keys: List[Hash]

    rlp_fields: ClassVar[List[str]] = ["address", "storage_keys"]

    @model_validator(mode="before")
    @classmethod
    def validate_list_form(cls, data: Any) -> Any:
        """Accept the `[address, [storage_key, ...]]` form of decoded transactions."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(
                    f"access list entry must be [address, storage_keys], got {len(data)} items"
                )
            address, storage_keys = data
            return {"address": address, "storage_keys": storage_keys}
        return data
