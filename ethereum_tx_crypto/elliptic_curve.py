"""
Elliptic Curves
^^^^^^^^^^^^^^^

Deterministic secp256k1 signing, public key recovery and address derivation.
"""

from typing import Tuple

import coincurve

from ethereum_tx_base_types import SECP256K1N, Address
from ethereum_tx_exceptions import KeyFormatError, SignatureError

from .hash import keccak256

SECP256K1B = 7
SECP256K1P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F


def secp256k1_sign(msg_hash: bytes, secret_key: bytes) -> Tuple[int, int, int]:
    """
    Returns the signature of a message hash given the secret key.

    Signatures are deterministic (RFC 6979).

    Parameters
    ----------
    msg_hash :
        32-byte hash of the message being signed.
    secret_key :
        32-byte secp256k1 private key.

    Returns
    -------
    signature : `Tuple[int, int, int]`
        The `r` and `s` values of the signature and the recovery id (0 or 1).
    """
    if len(secret_key) != 32:
        raise KeyFormatError(f"Private key must be 32 bytes in length, got {len(secret_key)}")
    try:
        private_key = coincurve.PrivateKey(bytes(secret_key))
    except ValueError as e:
        raise KeyFormatError("Private key is not a valid secp256k1 scalar") from e
    signature = private_key.sign_recoverable(bytes(msg_hash), hasher=None)

    return (
        int.from_bytes(signature[0:32], "big"),
        int.from_bytes(signature[32:64], "big"),
        signature[64],
    )


def secp256k1_recover(r: int, s: int, v: int, msg_hash: bytes) -> bytes:
    """
    Recovers the public key from a given signature.

    Parameters
    ----------
    r :
        x-coordinate of the signature point.
    s :
        Signature proof.
    v :
        Recovery id, 0 or 1.
    msg_hash :
        Hash of the message being recovered.

    Returns
    -------
    public_key : `bytes`
        Recovered 64-byte public key, without the format prefix.
    """
    if not 0 < r < SECP256K1N:
        raise SignatureError("Invalid signature: r is out of range")
    if not 0 < s < SECP256K1N:
        raise SignatureError("Invalid signature: s is out of range")
    if v not in (0, 1):
        raise SignatureError(f"Invalid signature: recovery id {v} is not 0 or 1")

    is_square = pow(
        pow(r, 3, SECP256K1P) + SECP256K1B,
        (SECP256K1P - 1) // 2,
        SECP256K1P,
    )

    if is_square != 1:
        raise SignatureError("r is not the x-coordinate of a point on the secp256k1 curve")

    signature = r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([v])

    # If the recovery algorithm returns the point at infinity,
    # the signature is considered invalid.
    try:
        public_key = coincurve.PublicKey.from_signature_and_message(
            signature, bytes(msg_hash), hasher=None
        )
    except ValueError as e:
        raise SignatureError("Invalid signature") from e

    return public_key.format(compressed=False)[1:]


def public_key_to_address(public_key: bytes) -> Address:
    """
    Derive the address of an uncompressed 64-byte public key: the last 20 bytes of its
    keccak256 hash.
    """
    if len(public_key) != 64:
        raise SignatureError(f"Public key must be 64 bytes in length, got {len(public_key)}")
    return Address(keccak256(public_key)[12:])


def private_key_to_address(secret_key: bytes) -> Address:
    """Derive the address that signs with the given private key."""
    try:
        public_key = coincurve.PrivateKey(bytes(secret_key)).public_key
    except ValueError as e:
        raise KeyFormatError("Private key is not a valid secp256k1 scalar") from e
    return public_key_to_address(public_key.format(compressed=False)[1:])
