"""
Test suite for the typed transactions: access list and fee market transactions.
"""

from typing import Any, Dict, Type

import pytest

from ethereum_tx_base_types import Hash, TestAddress
from ethereum_tx_exceptions import ConfigMismatchError, SignatureError, ValidationError
from ethereum_tx_forks import ChainRules

from ..access_list_transaction import AccessListTransaction
from ..capabilities import Capability, TransactionType
from ..fee_market_transaction import FeeMarketTransaction
from ..options import TxOptions
from ..typed_transaction import TypedTransaction

ACCESS_LIST = [
    {"address": TestAddress, "storageKeys": [Hash(1), Hash(2)]},
]


def fee_market_transfer(**kwargs) -> Dict[str, Any]:
    """Return the data of a fee market value transfer, updated with the given fields."""
    return {
        "gasLimit": 100_000,
        "maxFeePerGas": 10,
        "maxPriorityFeePerGas": 2,
        "to": TestAddress,
        "value": 1,
    } | kwargs


def access_list_transfer(**kwargs) -> Dict[str, Any]:
    """Return the data of an access list value transfer, updated with the given fields."""
    return {"gasLimit": 100_000, "gasPrice": 10, "to": TestAddress, "value": 1} | kwargs


TYPED_TRANSACTIONS = [
    pytest.param(AccessListTransaction, access_list_transfer(), id="access_list"),
    pytest.param(FeeMarketTransaction, fee_market_transfer(), id="fee_market"),
]


@pytest.mark.parametrize("tx_class, tx_data", TYPED_TRANSACTIONS)
def test_chain_id_defaults_to_chain_rules(tx_class: Type[TypedTransaction], tx_data: Dict):
    """Test that the chain id is taken from the chain rules when not given."""
    tx = tx_class.from_tx_data(tx_data)
    assert tx.chain_id == 1
    assert tx.to_json()["chainId"] == "0x1"

    tx = tx_class.from_tx_data(tx_data | {"chainId": 5})
    assert tx.chain_rules.chain.name == "goerli"
    assert tx.chain_rules.hardfork == "merge"

    tx = tx_class.from_tx_data(tx_data | {"chainId": 1337})
    assert tx.chain_rules.chain_id == 1337
    assert tx.chain_rules.chain.base_chain == "mainnet"


@pytest.mark.parametrize("tx_class, tx_data", TYPED_TRANSACTIONS)
def test_chain_id_mismatch(tx_class: Type[TypedTransaction], tx_data: Dict):
    """Test that the chain id has to match the chain id of the chain rules."""
    tx = tx_class.from_tx_data(
        tx_data | {"chainId": 1}, TxOptions(chain_rules=ChainRules(chain="mainnet"))
    )
    assert tx.chain_id == 1
    with pytest.raises(ConfigMismatchError, match="The chain ID does not match"):
        tx_class.from_tx_data(
            tx_data | {"chainId": 1}, TxOptions(chain_rules=ChainRules(chain="goerli"))
        )


@pytest.mark.parametrize(
    "tx_class, tx_data, hardfork, error",
    [
        pytest.param(
            AccessListTransaction,
            access_list_transfer(),
            "istanbul",
            "EIP-2930 not enabled on chain rules",
            id="access_list",
        ),
        pytest.param(
            FeeMarketTransaction,
            fee_market_transfer(),
            "berlin",
            "EIP-1559 not enabled on chain rules",
            id="fee_market",
        ),
    ],
)
def test_eip_not_enabled(
    tx_class: Type[TypedTransaction], tx_data: Dict, hardfork: str, error: str
):
    """Test that typed transactions need their EIP to be active."""
    with pytest.raises(ValidationError, match=error):
        tx_class.from_tx_data(tx_data, TxOptions(chain_rules=ChainRules(hardfork=hardfork)))


@pytest.mark.parametrize("tx_class, tx_data", TYPED_TRANSACTIONS)
def test_y_parity(tx_class: Type[TypedTransaction], tx_data: Dict):
    """Test that `v` is the y-parity of the signature."""
    with pytest.raises(ValidationError, match="y-parity of the transaction should either be 0"):
        tx_class.from_tx_data(tx_data | {"v": 27, "r": 1, "s": 1})


@pytest.mark.parametrize("tx_class, tx_data", TYPED_TRANSACTIONS)
def test_high_s_rejected(tx_class: Type[TypedTransaction], tx_data: Dict):
    """Test that typed transactions reject high-S signatures on construction."""
    with pytest.raises(ValidationError, match="s-values greater than secp256k1n/2"):
        tx_class.from_tx_data(tx_data | {"v": 0, "r": 1, "s": 2**255})


@pytest.mark.parametrize(
    "tx_class, tx_data, capabilities",
    [
        pytest.param(
            AccessListTransaction,
            access_list_transfer(),
            (Capability.EIP2718_TYPED_TRANSACTION, Capability.EIP2930_ACCESS_LISTS),
            id="access_list",
        ),
        pytest.param(
            FeeMarketTransaction,
            fee_market_transfer(),
            (
                Capability.EIP1559_FEE_MARKET,
                Capability.EIP2718_TYPED_TRANSACTION,
                Capability.EIP2930_ACCESS_LISTS,
            ),
            id="fee_market",
        ),
    ],
)
def test_capabilities(tx_class: Type[TypedTransaction], tx_data: Dict, capabilities: tuple):
    """Test the capabilities of each transaction type."""
    tx = tx_class.from_tx_data(tx_data)
    assert tx.active_capabilities == capabilities
    assert not tx.supports(Capability.EIP155_REPLAY_PROTECTION)


@pytest.mark.parametrize("tx_class, tx_data", TYPED_TRANSACTIONS)
def test_sign_and_verify(tx_class: Type[TypedTransaction], tx_data: Dict, private_key: bytes):
    """Test that a signed transaction verifies and recovers the signing address."""
    tx = tx_class.from_tx_data(tx_data | {"accessList": ACCESS_LIST})
    signed = tx.sign(private_key)
    assert not tx.is_signed()
    assert signed.is_signed()
    assert signed.v in (0, 1)
    assert signed.verify_signature()
    assert signed.get_sender_address() == TestAddress
    assert signed.validate()
    assert signed.serialize() == tx.sign(private_key).serialize()
    assert signed.chain_rules is not tx.chain_rules
    assert signed.chain_rules.hardfork == tx.chain_rules.hardfork

    message = tx.get_message_to_sign(hash_message=False)
    assert message[0] == tx_class.transaction_type
    assert signed.get_message_to_verify_signature() == tx.get_message_to_sign()


@pytest.mark.parametrize("tx_class, tx_data", TYPED_TRANSACTIONS)
def test_corrupted_signature(
    tx_class: Type[TypedTransaction], tx_data: Dict, private_key: bytes
):
    """Test that an unrecoverable signature fails verification without raising."""
    signed = tx_class.from_tx_data(tx_data).sign(private_key)
    corrupted = tx_class.from_tx_data(signed.to_json() | {"r": 0})
    assert corrupted.is_signed()
    assert not corrupted.verify_signature()
    assert corrupted.validate(string_error=True) == ["Invalid Signature"]
    with pytest.raises(SignatureError):
        corrupted.get_sender_address()


@pytest.mark.parametrize("tx_class, tx_data", TYPED_TRANSACTIONS)
def test_views(tx_class: Type[TypedTransaction], tx_data: Dict, private_key: bytes):
    """Test that the json, raw and serialized views rebuild the same transaction."""
    signed = tx_class.from_tx_data(tx_data | {"accessList": ACCESS_LIST}).sign(private_key)
    json = signed.to_json()
    assert json["type"] == hex(tx_class.transaction_type)
    assert json["accessList"] == [
        {"address": str(TestAddress), "storageKeys": [str(Hash(1)), str(Hash(2))]}
    ]
    options = TxOptions(chain_rules=signed.chain_rules)

    from_json = tx_class.from_tx_data(json, options)
    assert from_json.to_json() == json
    assert from_json.raw() == signed.raw()

    from_raw = tx_class.from_values_array(signed.raw(), options)
    assert from_raw.to_json() == json

    serialized = signed.serialize()
    assert serialized[0] == tx_class.transaction_type
    from_serialized = tx_class.from_serialized_tx(serialized, options)
    assert from_serialized.to_json() == json
    assert from_serialized.hash() == signed.hash()
    assert from_serialized.get_sender_address() == TestAddress


def test_wrong_type_prefix(private_key: bytes):
    """Test that the type byte of a serialized transaction is checked."""
    serialized = FeeMarketTransaction.from_tx_data(fee_market_transfer()).sign(private_key)
    with pytest.raises(ValidationError, match="wrong tx type, expected: 1, received: 0x02"):
        AccessListTransaction.from_serialized_tx(serialized.serialize())
    with pytest.raises(ValidationError, match="Only expecting 9 values"):
        FeeMarketTransaction.from_serialized_tx(b"\x02\xc0")


def test_empty_v_in_values_array(private_key: bytes):
    """Test that an empty `v` of a signed raw transaction means a y-parity of zero."""
    signed = FeeMarketTransaction.from_tx_data(fee_market_transfer()).sign(private_key)
    raw = signed.raw()
    raw[-3] = b""
    tx = FeeMarketTransaction.from_values_array(raw)
    assert tx.is_signed()
    assert tx.v == 0


def test_access_list_data_fee():
    """Test the cost of the access list entries and storage keys."""
    tx = AccessListTransaction.from_tx_data(
        access_list_transfer(accessList=ACCESS_LIST, data="0x0001"),
        TxOptions(chain_rules=ChainRules(hardfork="berlin")),
    )
    assert tx.get_data_fee() == 4 + 16 + 2_400 + 2 * 1_900
    assert tx.get_base_fee() == 21_000 + tx.get_data_fee()


def test_access_list_as_values():
    """Test that access list entries can be given as `[address, storage_keys]`."""
    tx = AccessListTransaction.from_tx_data(
        access_list_transfer(accessList=[[TestAddress, [Hash(1)]]])
    )
    assert tx.access_list[0].address == TestAddress
    assert tx.access_list[0].storage_keys == [Hash(1)]
    with pytest.raises(ValidationError):
        AccessListTransaction.from_tx_data(access_list_transfer(accessList=[[TestAddress]]))


def test_creation_with_init_code_cost(private_key: bytes):
    """Test the base fee of a contract creation with the EIP-3860 init code cost."""
    chain_rules = ChainRules(hardfork="merge", eips=[3860])
    tx = FeeMarketTransaction.from_tx_data(
        fee_market_transfer(to="", data=b"\x00" * 64), TxOptions(chain_rules=chain_rules)
    )
    assert tx.to_creation_address()
    assert tx.get_base_fee() == 4 * 64 + 21_000 + 32_000 + 2 * 2

    signed = tx.sign(private_key)
    assert signed.is_signed()
    assert signed.verify_signature()
    assert signed.chain_rules.is_activated_eip(3860)


def test_init_code_size_limit():
    """Test the EIP-3860 limit of the size of contract creation code."""
    chain_rules = ChainRules(hardfork="shanghai")
    too_large = fee_market_transfer(to=None, data=b"\x01" * (49_152 + 1))
    with pytest.raises(ValidationError, match="initcode size of this transaction is too large"):
        FeeMarketTransaction.from_tx_data(too_large, TxOptions(chain_rules=chain_rules))

    tx = FeeMarketTransaction.from_tx_data(
        too_large,
        TxOptions(chain_rules=chain_rules, allow_unlimited_init_code_size=True),
    )
    assert len(tx.data) == 49_153

    tx = FeeMarketTransaction.from_tx_data(
        too_large, TxOptions(chain_rules=ChainRules(hardfork="merge"))
    )
    assert len(tx.data) == 49_153


def test_fee_market_fee_checks():
    """Test the relation between the maximum fee and the priority fee."""
    with pytest.raises(ValidationError, match="maxFeePerGas cannot be less than"):
        FeeMarketTransaction.from_tx_data(fee_market_transfer(maxPriorityFeePerGas=11))
    with pytest.raises(ValidationError, match="gasLimit \\* maxFeePerGas cannot exceed"):
        FeeMarketTransaction.from_tx_data(
            fee_market_transfer(gasLimit=2**64 - 1, maxFeePerGas=2**255)
        )
    with pytest.raises(ValidationError, match="maxPriorityFeePerGas cannot exceed MAX_INTEGER"):
        FeeMarketTransaction.from_tx_data(
            fee_market_transfer(maxPriorityFeePerGas=2**256)
        )


@pytest.mark.parametrize(
    "base_fee, upfront_cost",
    [
        pytest.param(None, 100 * 10 + 1, id="max_fee"),
        pytest.param(7, 100 * (7 + 2) + 1, id="full_priority_fee"),
        pytest.param(9, 100 * 10 + 1, id="capped_priority_fee"),
    ],
)
def test_fee_market_upfront_cost(base_fee: int | None, upfront_cost: int):  # noqa: D103
    tx = FeeMarketTransaction.from_tx_data(fee_market_transfer(gasLimit=100))
    assert tx.get_upfront_cost(base_fee) == upfront_cost


def test_access_list_upfront_cost():  # noqa: D103
    tx = AccessListTransaction.from_tx_data(access_list_transfer(gasLimit=100, value=5))
    assert tx.get_upfront_cost() == 100 * 10 + 5


def test_error_str():
    """Test the description of typed transactions used to annotate errors."""
    tx = FeeMarketTransaction.from_tx_data(fee_market_transfer(accessList=ACCESS_LIST))
    error_str = tx.error_str()
    assert "tx type=2" in error_str
    assert "chainId=0x1" in error_str
    assert "maxFeePerGas=0xa" in error_str
    assert "maxPriorityFeePerGas=0x2" in error_str
    assert "accessListCount=1" in error_str

    tx = AccessListTransaction.from_tx_data(access_list_transfer())
    assert "gasPrice=0xa accessListCount=0" in tx.error_str()


def test_transaction_types():  # noqa: D103
    assert AccessListTransaction.from_tx_data().type == TransactionType.ACCESS_LIST
    assert FeeMarketTransaction.from_tx_data().type == TransactionType.FEE_MARKET
