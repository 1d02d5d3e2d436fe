"""Fee market transactions as defined by EIP-1559."""

from typing import Any, ClassVar, List, Sequence

from ethereum_tx_base_types import MAX_INTEGER, HexNumber
from ethereum_tx_exceptions import ValidationError

from .capabilities import Capability, TransactionType
from .options import TxOptions
from .typed_transaction import TypedTransaction
from .utils import validate_no_leading_zeroes, validate_values_array


class FeeMarketTransaction(TypedTransaction):
    """
    Transaction paying the block base fee plus a priority fee, up to a maximum fee per gas.
    """

    transaction_type: ClassVar[TransactionType] = TransactionType.FEE_MARKET
    defining_eip: ClassVar[int] = 1559

    max_priority_fee_per_gas: HexNumber = HexNumber(0)
    max_fee_per_gas: HexNumber = HexNumber(0)

    rlp_fields: ClassVar[List[str]] = [
        "chain_id",
        "nonce",
        "max_priority_fee_per_gas",
        "max_fee_per_gas",
        "gas_limit",
        "to",
        "value",
        "data",
        "access_list",
        "v",
        "r",
        "s",
    ]
    rlp_signing_fields: ClassVar[List[str]] = [
        "chain_id",
        "nonce",
        "max_priority_fee_per_gas",
        "max_fee_per_gas",
        "gas_limit",
        "to",
        "value",
        "data",
        "access_list",
    ]

    @classmethod
    def from_values_array(
        cls, values: Sequence[Any], opts: TxOptions | None = None
    ) -> "FeeMarketTransaction":
        """
        Instantiate a transaction from `[chainId, nonce, maxPriorityFeePerGas, maxFeePerGas,
        gasLimit, to, value, data, accessList]`, followed by `[v, r, s]` when signed.
        """
        validate_values_array(values, [9, 12], "EIP-1559")
        (
            chain_id,
            nonce,
            max_priority_fee_per_gas,
            max_fee_per_gas,
            gas_limit,
            to,
            value,
            data,
            access_list,
            *signature,
        ) = values
        v, r, s = signature if signature else (None, None, None)
        validate_no_leading_zeroes(
            {
                "chainId": chain_id,
                "nonce": nonce,
                "maxPriorityFeePerGas": max_priority_fee_per_gas,
                "maxFeePerGas": max_fee_per_gas,
                "gasLimit": gas_limit,
                "value": value,
                "v": v,
                "r": r,
                "s": s,
            }
        )
        if signature:
            v, r, s = cls._signature_from_values(v, r, s)
        tx = cls.from_tx_data(
            {
                "chainId": chain_id,
                "nonce": nonce,
                "maxPriorityFeePerGas": max_priority_fee_per_gas,
                "maxFeePerGas": max_fee_per_gas,
                "gasLimit": gas_limit,
                "to": to,
                "value": value,
                "data": data,
                "accessList": access_list,
                "v": v,
                "r": r,
                "s": s,
            },
            opts,
        )
        assert isinstance(tx, FeeMarketTransaction)
        return tx

    @classmethod
    def from_serialized_tx(
        cls, serialized: bytes, opts: TxOptions | None = None
    ) -> "FeeMarketTransaction":
        """Instantiate a transaction from `0x02 || rlp(values)`."""
        return cls.from_values_array(cls._decode_serialized(serialized), opts)

    def _validate(self) -> None:
        super()._validate()
        self._validate_cannot_exceed_max_integer(
            {
                "maxFeePerGas": self.max_fee_per_gas,
                "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
            }
        )
        if self.gas_limit * self.max_fee_per_gas > MAX_INTEGER:
            raise ValidationError(
                self.error_message("gasLimit * maxFeePerGas cannot exceed MAX_INTEGER (2^256-1)")
            )
        if self.max_fee_per_gas < self.max_priority_fee_per_gas:
            raise ValidationError(
                self.error_message(
                    "maxFeePerGas cannot be less than maxPriorityFeePerGas "
                    "(The total must be the larger of the two)"
                )
            )

    def _get_active_capabilities(self) -> List[Capability]:
        return [
            Capability.EIP1559_FEE_MARKET,
            Capability.EIP2718_TYPED_TRANSACTION,
            Capability.EIP2930_ACCESS_LISTS,
        ]

    def get_upfront_cost(self, base_fee: int | None = None) -> int:
        """
        Return the amount of wei the sender needs to hold to pay for the transaction.

        Without a base fee this is `gas_limit * max_fee_per_gas + value`. With the base fee of
        the block, the gas price is the base fee plus the priority fee the maximum fee still
        leaves room for.
        """
        if base_fee is None:
            return self.gas_limit * self.max_fee_per_gas + self.value
        inclusion_fee_per_gas = min(
            self.max_priority_fee_per_gas, self.max_fee_per_gas - base_fee
        )
        return self.gas_limit * (inclusion_fee_per_gas + base_fee) + self.value

    def error_str(self) -> str:
        """Return a short description of the transaction, used to annotate errors."""
        return (
            f"{self._shared_error_postfix()} chainId={self.chain_id} "
            f"maxFeePerGas={self.max_fee_per_gas} "
            f"maxPriorityFeePerGas={self.max_priority_fee_per_gas} "
            f"accessListCount={len(self.access_list)}"
        )
