"""
Protocol constants and common values used by transactions.
"""

from .base_types import Address

MAX_INTEGER = 2**256 - 1
MAX_UINT64 = 2**64 - 1

SECP256K1N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1N_DIV_2 = SECP256K1N // 2

TestAddress = Address("0xa94f5374fce5edbc8e2a8697c15331677e6ebf0b")
TestPrivateKey = 0x45A915E4D060149EB4365960E6A7A45F334393093061116B197E3240065FF2D8
