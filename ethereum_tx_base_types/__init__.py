"""
Common definitions and types.
"""

from .base_types import Address, Bytes, FixedSizeBytes, Hash, HexNumber, Number
from .composite_types import AccessList
from .constants import (
    MAX_INTEGER,
    MAX_UINT64,
    SECP256K1N,
    SECP256K1N_DIV_2,
    TestAddress,
    TestPrivateKey,
)
from .conversions import int_to_bytes, to_bytes, to_number
from .pydantic import CamelModel
from .serialization import RLPSerializable, to_raw_element

__all__ = (
    "AccessList",
    "Address",
    "Bytes",
    "CamelModel",
    "FixedSizeBytes",
    "Hash",
    "HexNumber",
    "MAX_INTEGER",
    "MAX_UINT64",
    "Number",
    "RLPSerializable",
    "SECP256K1N",
    "SECP256K1N_DIV_2",
    "TestAddress",
    "TestPrivateKey",
    "int_to_bytes",
    "to_bytes",
    "to_number",
    "to_raw_element",
)
