"""Access list transactions as defined by EIP-2930."""

from typing import Any, ClassVar, List, Sequence

from ethereum_tx_base_types import MAX_INTEGER, HexNumber
from ethereum_tx_exceptions import ValidationError

from .capabilities import Capability, TransactionType
from .options import TxOptions
from .typed_transaction import TypedTransaction
from .utils import validate_no_leading_zeroes, validate_values_array


class AccessListTransaction(TypedTransaction):
    """Transaction paying a single gas price, with an access list."""

    transaction_type: ClassVar[TransactionType] = TransactionType.ACCESS_LIST
    defining_eip: ClassVar[int] = 2930

    gas_price: HexNumber = HexNumber(0)

    rlp_fields: ClassVar[List[str]] = [
        "chain_id",
        "nonce",
        "gas_price",
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
        "gas_price",
        "gas_limit",
        "to",
        "value",
        "data",
        "access_list",
    ]

    @classmethod
    def from_values_array(
        cls, values: Sequence[Any], opts: TxOptions | None = None
    ) -> "AccessListTransaction":
        """
        Instantiate a transaction from `[chainId, nonce, gasPrice, gasLimit, to, value, data,
        accessList]`, followed by `[v, r, s]` when signed.
        """
        validate_values_array(values, [8, 11], "EIP-2930")
        chain_id, nonce, gas_price, gas_limit, to, value, data, access_list, *signature = values
        v, r, s = signature if signature else (None, None, None)
        validate_no_leading_zeroes(
            {
                "chainId": chain_id,
                "nonce": nonce,
                "gasPrice": gas_price,
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
                "gasPrice": gas_price,
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
        assert isinstance(tx, AccessListTransaction)
        return tx

    @classmethod
    def from_serialized_tx(
        cls, serialized: bytes, opts: TxOptions | None = None
    ) -> "AccessListTransaction":
        """Instantiate a transaction from `0x01 || rlp(values)`."""
        return cls.from_values_array(cls._decode_serialized(serialized), opts)

    def _validate(self) -> None:
        super()._validate()
        self._validate_cannot_exceed_max_integer({"gasPrice": self.gas_price})
        if self.gas_price * self.gas_limit > MAX_INTEGER:
            raise ValidationError(
                self.error_message("gasLimit * gasPrice cannot exceed MAX_INTEGER (2^256-1)")
            )

    def _get_active_capabilities(self) -> List[Capability]:
        return [Capability.EIP2718_TYPED_TRANSACTION, Capability.EIP2930_ACCESS_LISTS]

    def get_upfront_cost(self) -> int:
        """Return `gas_limit * gas_price + value`."""
        return self.gas_limit * self.gas_price + self.value

    def error_str(self) -> str:
        """Return a short description of the transaction, used to annotate errors."""
        return (
            f"{self._shared_error_postfix()} chainId={self.chain_id} gasPrice={self.gas_price} "
            f"accessListCount={len(self.access_list)}"
        )
