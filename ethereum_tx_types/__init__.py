"""
Ethereum transactions: legacy, access list (EIP-2930) and fee market (EIP-1559) types.
"""

from .access_list_transaction import AccessListTransaction
from .base_transaction import BaseTransaction
from .capabilities import Capability, TransactionType
from .factory import TransactionFactory
from .fee_market_transaction import FeeMarketTransaction
from .legacy_transaction import LegacyTransaction
from .options import TxOptions
from .typed_transaction import TypedTransaction

__all__ = (
    "AccessListTransaction",
    "BaseTransaction",
    "Capability",
    "FeeMarketTransaction",
    "LegacyTransaction",
    "TransactionFactory",
    "TransactionType",
    "TxOptions",
    "TypedTransaction",
)
