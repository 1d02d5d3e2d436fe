"""Transaction types and the capabilities a transaction can support."""

from enum import IntEnum


class TransactionType(IntEnum):
    """Transaction types."""

    LEGACY = 0
    ACCESS_LIST = 1
    FEE_MARKET = 2


class Capability(IntEnum):
    """
    Protocol features a transaction can support, named by the EIP that defines them.

    A capability is different from the transaction type: EIP-2930 access lists are
    supported by fee market transactions too.
    """

    EIP155_REPLAY_PROTECTION = 155
    """Simple replay attack protection: the chain id is part of the signed message."""

    EIP1559_FEE_MARKET = 1559
    """Fee market change: priority fee and max fee per gas instead of a gas price."""

    EIP2718_TYPED_TRANSACTION = 2718
    """Typed transaction envelope: the serialization is prefixed by the type byte."""

    EIP2930_ACCESS_LISTS = 2930
    """Optional access lists of addresses and storage keys."""
