"""
Cryptographic Hash Functions
^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Cryptographic hashing functions.
"""

from Crypto.Hash import keccak

from ethereum_tx_base_types import Hash


def keccak256(buffer: bytes) -> Hash:
    """
    Computes the keccak256 hash of the input `buffer`.

    Parameters
    ----------
    buffer :
        Input for the hashing function.

    Returns
    -------
    hash : `ethereum_tx_base_types.Hash`
        Output of the hash function.
    """
    k = keccak.new(digest_bits=256)
    return Hash(k.update(buffer).digest())
