"""Build transactions of any type from data, serialized bytes or block bodies."""

from typing import Any, Dict, List, Mapping, Type

from ethereum_tx_base_types import to_number
from ethereum_tx_exceptions import ValidationError

from .access_list_transaction import AccessListTransaction
from .base_transaction import BaseTransaction
from .capabilities import TransactionType
from .fee_market_transaction import FeeMarketTransaction
from .legacy_transaction import LegacyTransaction
from .options import TxOptions

TRANSACTION_CLASSES: Dict[TransactionType, Type[BaseTransaction]] = {
    TransactionType.LEGACY: LegacyTransaction,
    TransactionType.ACCESS_LIST: AccessListTransaction,
    TransactionType.FEE_MARKET: FeeMarketTransaction,
}


class TransactionFactory:
    """Dispatch transaction inputs to the class of their transaction type."""

    @staticmethod
    def transaction_class(tx_type: int) -> Type[BaseTransaction]:
        """Return the class of the transaction type."""
        try:
            return TRANSACTION_CLASSES[TransactionType(tx_type)]
        except ValueError as e:
            raise ValidationError(f"Tx instantiation with type {tx_type} not supported") from e

    @classmethod
    def from_tx_data(
        cls, tx_data: Mapping[str, Any], opts: TxOptions | None = None
    ) -> BaseTransaction:
        """Build a transaction from a dictionary of fields; a missing `type` means legacy."""
        tx_type = tx_data.get("type")
        if tx_type is None:
            return LegacyTransaction.from_tx_data(tx_data, opts)
        try:
            tx_type = to_number(tx_type)
        except ValueError as e:
            raise ValidationError(f"Invalid transaction type {tx_type!r}") from e
        return cls.transaction_class(tx_type).from_tx_data(tx_data, opts)

    @classmethod
    def from_serialized_data(cls, data: bytes, opts: TxOptions | None = None) -> BaseTransaction:
        """
        Build a transaction from its canonical serialization.

        A first byte up to 0x7f is the type of a typed transaction, anything above is the start
        of the RLP list of a legacy transaction.
        """
        data = bytes(data)
        if len(data) == 0:
            raise ValidationError("Cannot decode transaction: empty input")
        if data[0] <= 0x7F:
            return cls.transaction_class(data[0]).from_serialized_tx(data, opts)
        return LegacyTransaction.from_serialized_tx(data, opts)

    @classmethod
    def from_block_body_data(
        cls, data: bytes | List[Any], opts: TxOptions | None = None
    ) -> BaseTransaction:
        """
        Build a transaction as found in a block body: typed transactions are byte strings, and
        legacy transactions are the list of their raw values.
        """
        if isinstance(data, bytes):
            return cls.from_serialized_data(data, opts)
        if isinstance(data, list):
            return LegacyTransaction.from_values_array(data, opts)
        raise ValidationError("Cannot decode transaction: unknown type input")
