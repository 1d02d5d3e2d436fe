"""
Cryptographic primitives used to hash, sign and recover transactions.
"""

from .elliptic_curve import (
    SECP256K1P,
    private_key_to_address,
    public_key_to_address,
    secp256k1_recover,
    secp256k1_sign,
)
from .hash import keccak256

__all__ = (
    "SECP256K1P",
    "keccak256",
    "private_key_to_address",
    "public_key_to_address",
    "secp256k1_recover",
    "secp256k1_sign",
)
