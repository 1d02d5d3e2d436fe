"""Legacy transactions, optionally replay-protected as defined by EIP-155."""

from typing import Any, ClassVar, List, Literal, Sequence, Tuple

import rlp as pyrlp
from rlp.exceptions import DecodingError

from ethereum_tx_base_types import MAX_INTEGER, HexNumber, to_raw_element
from ethereum_tx_crypto import keccak256
from ethereum_tx_exceptions import ConfigMismatchError, SignatureError, ValidationError
from ethereum_tx_forks import ChainRules

from .base_transaction import BaseTransaction
from .capabilities import Capability, TransactionType
from .options import TxOptions
from .utils import validate_no_leading_zeroes, validate_values_array


class LegacyTransaction(BaseTransaction):
    """
    Transaction paying a single gas price.

    The chain id is not a field: replay-protected transactions encode it in `v` as
    `2 * chain_id + 35` or `2 * chain_id + 36`.
    """

    transaction_type: ClassVar[TransactionType] = TransactionType.LEGACY

    gas_price: HexNumber = HexNumber(0)

    zero: ClassVar[Literal[0]] = 0

    rlp_fields: ClassVar[List[str]] = [
        "nonce",
        "gas_price",
        "gas_limit",
        "to",
        "value",
        "data",
        "v",
        "r",
        "s",
    ]
    rlp_signing_fields: ClassVar[List[str]] = [
        "nonce",
        "gas_price",
        "gas_limit",
        "to",
        "value",
        "data",
    ]

    @classmethod
    def from_values_array(
        cls, values: Sequence[Any], opts: TxOptions | None = None
    ) -> "LegacyTransaction":
        """
        Instantiate a transaction from `[nonce, gasPrice, gasLimit, to, value, data]`, followed
        by `[v, r, s]` when signed.
        """
        validate_values_array(values, [6, 9], "legacy")
        nonce, gas_price, gas_limit, to, value, data, *signature = values
        v, r, s = signature if signature else (None, None, None)
        validate_no_leading_zeroes(
            {
                "nonce": nonce,
                "gasPrice": gas_price,
                "gasLimit": gas_limit,
                "value": value,
                "v": v,
                "r": r,
                "s": s,
            }
        )
        tx = cls.from_tx_data(
            {
                "nonce": nonce,
                "gasPrice": gas_price,
                "gasLimit": gas_limit,
                "to": to,
                "value": value,
                "data": data,
                "v": v,
                "r": r,
                "s": s,
            },
            opts,
        )
        assert isinstance(tx, LegacyTransaction)
        return tx

    @classmethod
    def from_serialized_tx(
        cls, serialized: bytes, opts: TxOptions | None = None
    ) -> "LegacyTransaction":
        """Instantiate a transaction from its RLP serialization."""
        try:
            values = pyrlp.decode(bytes(serialized))
        except DecodingError as e:
            raise ValidationError(f"Invalid serialized legacy transaction: {e}") from e
        return cls.from_values_array(values, opts)

    @property
    def chain_id(self) -> int:
        """Chain id of the chain rules."""
        return self.chain_rules.chain_id

    def get_rlp_signing_fields(self) -> List[str]:
        """Return the signing fields, extended by the chain id when replay-protected."""
        return self._signing_fields(self.active_capabilities)

    def _signing_fields(self, capabilities: Tuple[Capability, ...]) -> List[str]:
        if Capability.EIP155_REPLAY_PROTECTION in capabilities:
            return self.rlp_signing_fields + ["chain_id", "zero", "zero"]
        return self.rlp_signing_fields

    def _message_to_sign(self, hash_message: bool, capabilities: Tuple[Capability, ...]) -> Any:
        message = self.to_list_from_fields(self._signing_fields(capabilities))
        if hash_message:
            return keccak256(pyrlp.encode(message))
        return to_raw_element(message)

    def _signing_capabilities(self) -> Tuple[Capability, ...]:
        # A transaction without replay protection is re-signed with it after Spurious Dragon.
        capabilities = self.active_capabilities
        if (
            self.chain_rules.gte_hardfork("spuriousDragon")
            and Capability.EIP155_REPLAY_PROTECTION not in capabilities
        ):
            capabilities += (Capability.EIP155_REPLAY_PROTECTION,)
        return capabilities

    def _get_chain_rules(self, chain_rules: ChainRules | None) -> ChainRules:
        """
        Check `v` against the chain rules, or derive the chain id from `v` when no chain rules
        are given.
        """
        chain_id: int | None = None
        v = self.v
        if v is not None:
            if v < 37 and v not in (27, 28):
                raise ValidationError(
                    self.error_message(
                        "Legacy txs need either v = 27/28 or v >= 37 "
                        f"(EIP-155 replay protection), got v = {int(v)}"
                    )
                )
            if v not in (27, 28):
                if chain_rules is None:
                    chain_id = (v - 35) // 2
                elif chain_rules.gte_hardfork("spuriousDragon"):
                    doubled_chain_id = chain_rules.chain_id * 2
                    if v not in (doubled_chain_id + 35, doubled_chain_id + 36):
                        raise ConfigMismatchError(
                            self.error_message(
                                f"Incompatible EIP155-based V {int(v)} and chain id "
                                f"{chain_rules.chain_id}. See the chain_rules option "
                                "to set the chain id."
                            )
                        )
        return self._resolve_chain_rules(chain_rules, chain_id)

    def _validate(self) -> None:
        self._validate_cannot_exceed_max_integer({"gasPrice": self.gas_price})
        if self.gas_price * self.gas_limit > MAX_INTEGER:
            raise ValidationError(
                self.error_message("gas limit * gasPrice cannot exceed MAX_INTEGER (2^256-1)")
            )

    def _get_active_capabilities(self) -> List[Capability]:
        if not self.chain_rules.gte_hardfork("spuriousDragon"):
            return []
        if not self.is_signed():
            return [Capability.EIP155_REPLAY_PROTECTION]
        doubled_chain_id = self.chain_rules.chain_id * 2
        if self.v in (doubled_chain_id + 35, doubled_chain_id + 36):
            return [Capability.EIP155_REPLAY_PROTECTION]
        return []

    def _recovery_id(self) -> int:
        assert self.v is not None
        if self.supports(Capability.EIP155_REPLAY_PROTECTION):
            recovery_id = self.v - (self.chain_id * 2 + 35)
        else:
            recovery_id = self.v - 27
        if recovery_id not in (0, 1):
            raise SignatureError(self.error_message(f"Invalid signature v value {int(self.v)}"))
        return recovery_id

    def _process_signature(self, v: int, r: int, s: int) -> "LegacyTransaction":
        tx = self._with_signature(v, r, s)
        assert isinstance(tx, LegacyTransaction)
        return tx

    def get_upfront_cost(self) -> int:
        """Return `gas_limit * gas_price + value`."""
        return self.gas_limit * self.gas_price + self.value

    def error_str(self) -> str:
        """Return a short description of the transaction, used to annotate errors."""
        return f"{self._shared_error_postfix()} gasPrice={self.gas_price}"
