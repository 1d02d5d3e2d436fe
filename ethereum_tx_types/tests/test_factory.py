"""
Test suite for the transaction factory.
"""

from typing import Any, Dict, Type

import pytest

from ethereum_tx_base_types import TestAddress
from ethereum_tx_exceptions import ValidationError
from ethereum_tx_forks import ChainRules

from ..access_list_transaction import AccessListTransaction
from ..base_transaction import BaseTransaction
from ..factory import TransactionFactory
from ..fee_market_transaction import FeeMarketTransaction
from ..legacy_transaction import LegacyTransaction
from ..options import TxOptions

TX_DATA: Dict[str, Any] = {"gasLimit": 21_000, "to": TestAddress, "value": 1}


@pytest.mark.parametrize(
    "tx_type, tx_class",
    [
        pytest.param(None, LegacyTransaction, id="missing_type"),
        pytest.param(0, LegacyTransaction, id="legacy"),
        pytest.param("0x1", AccessListTransaction, id="access_list"),
        pytest.param(2, FeeMarketTransaction, id="fee_market"),
    ],
)
def test_from_tx_data(tx_type: Any, tx_class: Type[BaseTransaction]):
    """Test that the transaction data is dispatched on its type."""
    tx_data = TX_DATA if tx_type is None else TX_DATA | {"type": tx_type}
    tx = TransactionFactory.from_tx_data(tx_data)
    assert type(tx) is tx_class
    assert tx.to == TestAddress


@pytest.mark.parametrize(
    "tx_class",
    [
        pytest.param(LegacyTransaction, id="legacy"),
        pytest.param(AccessListTransaction, id="access_list"),
        pytest.param(FeeMarketTransaction, id="fee_market"),
    ],
)
def test_from_serialized_data(tx_class: Type[BaseTransaction], private_key: bytes):
    """Test that serialized transactions are decoded into the class of their type."""
    options = TxOptions(chain_rules=ChainRules(hardfork="london"))
    signed = tx_class.from_tx_data(TX_DATA, options).sign(private_key)

    tx = TransactionFactory.from_serialized_data(signed.serialize(), options)
    assert type(tx) is tx_class
    assert tx.hash() == signed.hash()
    assert tx.get_sender_address() == TestAddress

    block_body_data = signed.raw() if tx_class is LegacyTransaction else signed.serialize()
    tx = TransactionFactory.from_block_body_data(block_body_data, options)
    assert type(tx) is tx_class
    assert tx.hash() == signed.hash()


@pytest.mark.parametrize(
    "call",
    [
        pytest.param(lambda: TransactionFactory.from_tx_data({"type": 3}), id="unknown_type"),
        pytest.param(lambda: TransactionFactory.from_tx_data({"type": "0xzz"}), id="bad_type"),
        pytest.param(lambda: TransactionFactory.from_serialized_data(b""), id="empty_bytes"),
        pytest.param(
            lambda: TransactionFactory.from_serialized_data(b"\x05\xc0"), id="unknown_prefix"
        ),
        pytest.param(lambda: TransactionFactory.from_block_body_data(12), id="unknown_input"),
    ],
)
def test_invalid_input(call):
    """Test that inputs of unknown types are rejected."""
    with pytest.raises(ValidationError):
        call()
