"""Fields and behavior shared by the typed transactions of EIP-2718."""

from typing import Any, ClassVar, List, Tuple

import rlp as pyrlp
from pydantic import Field
from rlp.exceptions import DecodingError

from ethereum_tx_base_types import AccessList, HexNumber
from ethereum_tx_crypto import keccak256
from ethereum_tx_exceptions import ValidationError
from ethereum_tx_forks import ChainRules

from .base_transaction import BaseTransaction
from .capabilities import Capability


class TypedTransaction(BaseTransaction):
    """
    Transaction serialized as its type byte followed by the RLP list of its fields.

    Typed transactions carry their chain id and an access list, and store the y-parity of the
    signature (0 or 1) in `v`.
    """

    defining_eip: ClassVar[int]

    chain_id: HexNumber | None = None
    access_list: List[AccessList] = Field(default_factory=list)

    @classmethod
    def _decode_serialized(cls, serialized: bytes) -> Any:
        serialized = bytes(serialized)
        if len(serialized) == 0 or serialized[0] != cls.transaction_type:
            received = f"0x{serialized[:1].hex()}" if serialized else "empty input"
            raise ValidationError(
                f"Invalid serialized tx input: not an EIP-{cls.defining_eip} transaction "
                f"(wrong tx type, expected: {int(cls.transaction_type)}, received: {received})"
            )
        try:
            return pyrlp.decode(serialized[1:])
        except DecodingError as e:
            raise ValidationError(
                f"Invalid serialized EIP-{cls.defining_eip} transaction: {e}"
            ) from e

    @staticmethod
    def _signature_from_values(v: Any, r: Any, s: Any) -> Tuple[Any, Any, Any]:
        """Return `v`, `r`, `s` of a raw transaction; an empty `v` of a signature means zero."""
        if len(v) == 0 and len(r) > 0 and len(s) > 0:
            v = 0
        return v, r, s

    def get_rlp_prefix(self) -> bytes:
        """Return the type byte."""
        return bytes([self.transaction_type])

    def get_rlp_signing_prefix(self) -> bytes:
        """Return the type byte."""
        return bytes([self.transaction_type])

    def _message_to_sign(self, hash_message: bool, capabilities: Tuple[Capability, ...]) -> Any:
        message = self.rlp_signing_bytes()
        if hash_message:
            return keccak256(message)
        return message

    def _get_chain_rules(self, chain_rules: ChainRules | None) -> ChainRules:
        resolved = self._resolve_chain_rules(chain_rules, self.chain_id)
        if self.chain_id is None:
            self.__dict__["chain_id"] = HexNumber(resolved.chain_id)
            self.model_fields_set.add("chain_id")
        return resolved

    def _validate(self) -> None:
        if not self.chain_rules.is_activated_eip(self.defining_eip):
            raise ValidationError(
                self.error_message(f"EIP-{self.defining_eip} not enabled on chain rules")
            )
        if self.v is not None and self.v not in (0, 1):
            raise ValidationError(
                self.error_message("The y-parity of the transaction should either be 0 or 1")
            )
        self._validate_high_s()

    def _compute_data_fee(self) -> int:
        cost = super()._compute_data_fee()
        address_cost = self.chain_rules.param("gasPrices", "accessListAddressCost") or 0
        storage_key_cost = self.chain_rules.param("gasPrices", "accessListStorageKeyCost") or 0
        storage_keys = sum(len(entry.storage_keys) for entry in self.access_list)
        return cost + address_cost * len(self.access_list) + storage_key_cost * storage_keys

    def _recovery_id(self) -> int:
        assert self.v is not None
        return int(self.v)

    def _process_signature(self, v: int, r: int, s: int) -> "TypedTransaction":
        tx = self._with_signature(v - 27, r, s)
        assert isinstance(tx, TypedTransaction)
        return tx

