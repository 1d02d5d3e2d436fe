"""
Base transaction: the fields, checks and signing flow shared by every transaction type.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Literal, Mapping, Sequence, Tuple, Type, overload

from pydantic import AliasChoices, ConfigDict, Field, PrivateAttr, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel, to_snake

from config import TransactionConfig
from ethereum_tx_base_types import (
    MAX_INTEGER,
    MAX_UINT64,
    SECP256K1N_DIV_2,
    Address,
    Bytes,
    CamelModel,
    Hash,
    HexNumber,
    RLPSerializable,
    to_bytes,
    to_number,
    to_raw_element,
)
from ethereum_tx_crypto import keccak256, public_key_to_address, secp256k1_recover, secp256k1_sign
from ethereum_tx_exceptions import (
    ConfigMismatchError,
    KeyFormatError,
    SignatureError,
    ValidationError,
)
from ethereum_tx_forks import ChainRules
from ethereum_tx_logging import get_logger

from .capabilities import Capability, TransactionType
from .options import TxOptions
from .utils import ceiling_division

logger = get_logger(__name__)

NOT_ARRAY_KEYS = [
    "nonce",
    "gasPrice",
    "gasLimit",
    "to",
    "value",
    "data",
    "v",
    "r",
    "s",
    "type",
    "baseFee",
    "maxFeePerGas",
    "chainId",
]
"""Keys of the transaction data that must hold a single value, never a sequence."""


def _is_empty(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() in ("", "0x")
    if isinstance(value, bytes):
        return len(value) == 0
    return False


class BaseTransaction(CamelModel, RLPSerializable, ABC):
    """
    Fields and behavior common to all transaction types.

    Transactions are immutable: all fields are validated on construction, and `sign` returns
    a new transaction. Each transaction owns a copy of its chain rules, so changing the chain
    rules given in the options does not affect it.
    """

    model_config = ConfigDict(frozen=True)

    transaction_type: ClassVar[TransactionType]

    nonce: HexNumber = HexNumber(0)
    gas_limit: HexNumber = Field(
        HexNumber(0),
        validation_alias=AliasChoices("gasLimit", "gas", "gas_limit"),
    )
    to: Address | None = None
    value: HexNumber = HexNumber(0)
    data: Bytes = Field(Bytes(b""), validation_alias=AliasChoices("data", "input"))

    v: HexNumber | None = None
    r: HexNumber | None = None
    s: HexNumber | None = None

    _chain_rules: ChainRules | None = PrivateAttr(None)
    _tx_options: TxOptions | None = PrivateAttr(None)
    _active_capabilities: Tuple[Capability, ...] = PrivateAttr(())
    _cache: Dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_tx_data(cls, data: Any) -> Any:
        """
        Reject sequences given for single-valued fields, check the `type` key against the
        class, and treat empty values of `to` and of the signature as absent.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in NOT_ARRAY_KEYS:
            for name in (key, to_snake(key)):
                if isinstance(data.get(name), (list, tuple)):
                    raise ValidationError(f"{name} cannot be an array")
        if "type" in data:
            tx_type = data.pop("type")
            if tx_type is not None and to_number(tx_type) != cls.transaction_type:
                raise ValidationError(
                    f"{cls.__name__} cannot be created from data of transaction type {tx_type}"
                )
        for key in ("to", "v", "r", "s"):
            if _is_empty(data.get(key)):
                data[key] = None
        return data

    def model_post_init(self, __context: Any) -> None:
        """Range-check the fields, resolve the chain rules and derive the capabilities."""
        super().model_post_init(__context)
        tx_options = __context.get("tx_options") if isinstance(__context, dict) else None
        self._tx_options = tx_options if tx_options is not None else TxOptions()

        self._validate_cannot_exceed_max_integer({"value": self.value, "r": self.r, "s": self.s})
        self._validate_cannot_exceed_max_integer({"gasLimit": self.gas_limit}, 64)
        self._validate_cannot_exceed_max_integer({"nonce": self.nonce}, 64, cannot_equal=True)

        self._chain_rules = self._get_chain_rules(self._tx_options.chain_rules)

        if (
            self.to_creation_address()
            and self._chain_rules.is_activated_eip(3860)
            and not self._tx_options.allow_unlimited_init_code_size
        ):
            max_init_code_size = self._chain_rules.param("vm", "maxInitCodeSize")
            if max_init_code_size is not None and len(self.data) > max_init_code_size:
                raise ValidationError(
                    self.error_message(
                        "the initcode size of this transaction is too large: "
                        f"it is {len(self.data)} while the max is {max_init_code_size}"
                    )
                )

        self._validate()
        self._active_capabilities = tuple(self._get_active_capabilities())

    @classmethod
    def from_tx_data(
        cls,
        tx_data: Mapping[str, Any] | None = None,
        opts: TxOptions | None = None,
    ) -> "BaseTransaction":
        """
        Instantiate a transaction from a dictionary of fields.

        Keys can be given in camel case (`gasLimit`) or snake case (`gas_limit`). Values can be
        integers, hex strings or bytes; empty values mean zero, or absent for `to`, `v`, `r`
        and `s`.
        """
        try:
            return cls.model_validate(
                dict(tx_data) if tx_data is not None else {},
                context={"tx_options": opts if opts is not None else TxOptions()},
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {cls.__name__} data: {e}") from e

    @classmethod
    @abstractmethod
    def from_values_array(
        cls, values: Sequence[Any], opts: TxOptions | None = None
    ) -> "BaseTransaction":
        """Instantiate a transaction from the ordered list of its raw field values."""
        pass

    @classmethod
    @abstractmethod
    def from_serialized_tx(
        cls, serialized: bytes, opts: TxOptions | None = None
    ) -> "BaseTransaction":
        """Instantiate a transaction from its canonical serialization."""
        pass

    @property
    def type(self) -> TransactionType:
        """Transaction type."""
        return self.transaction_type

    @property
    def chain_rules(self) -> ChainRules:
        """Chain rules owned by the transaction."""
        assert self._chain_rules is not None
        return self._chain_rules

    @property
    def tx_options(self) -> TxOptions:
        """Options the transaction was constructed with."""
        assert self._tx_options is not None
        return self._tx_options

    @property
    def active_capabilities(self) -> Tuple[Capability, ...]:
        """Capabilities supported by the transaction."""
        return self._active_capabilities

    def supports(self, capability: Capability) -> bool:
        """Return whether the transaction supports the given capability."""
        return capability in self._active_capabilities

    def is_signed(self) -> bool:
        """Return whether `v`, `r` and `s` are all present."""
        return self.v is not None and self.r is not None and self.s is not None

    def to_creation_address(self) -> bool:
        """Return whether the transaction creates a contract."""
        return self.to is None

    # Fees

    def get_data_fee(self) -> int:
        """Return the gas cost of the data, cached per hard-fork."""
        hardfork = self.chain_rules.hardfork
        cached = self._cache.get("data_fee")
        if cached is not None and cached[0] == hardfork:
            return cached[1]
        data_fee = self._compute_data_fee()
        self._cache["data_fee"] = (hardfork, data_fee)
        return data_fee

    def _compute_data_fee(self) -> int:
        tx_data_zero = self.chain_rules.param("gasPrices", "txDataZero") or 0
        tx_data_non_zero = self.chain_rules.param("gasPrices", "txDataNonZero") or 0
        cost = sum(tx_data_zero if byte == 0 else tx_data_non_zero for byte in self.data)
        if self.to_creation_address() and self.chain_rules.is_activated_eip(3860):
            init_code_word_cost = self.chain_rules.param("gasPrices", "initCodeWordCost") or 0
            cost += init_code_word_cost * ceiling_division(len(self.data), 32)
        return cost

    def get_base_fee(self) -> int:
        """Return the minimum gas limit the transaction needs to be valid."""
        fee = self.get_data_fee() + (self.chain_rules.param("gasPrices", "tx") or 0)
        if self.chain_rules.gte_hardfork("homestead") and self.to_creation_address():
            fee += self.chain_rules.param("gasPrices", "txCreation") or 0
        return fee

    @abstractmethod
    def get_upfront_cost(self) -> int:
        """Return the amount of wei the sender needs to hold to pay for the transaction."""
        pass

    # Validation

    @overload
    def validate(self, string_error: Literal[False] = False) -> bool: ...

    @overload
    def validate(self, string_error: Literal[True]) -> List[str]: ...

    def validate(self, string_error: bool = False) -> bool | List[str]:
        """
        Check the gas limit against the base fee and, for signed transactions, the signature.

        Returns whether the transaction is valid, or the list of the violations found when
        `string_error` is set.
        """
        errors: List[str] = []
        base_fee = self.get_base_fee()
        if base_fee > self.gas_limit:
            errors.append(
                f"gasLimit is too low. given {int(self.gas_limit)}, need at least {base_fee}"
            )
        if self.is_signed() and not self.verify_signature():
            errors.append("Invalid Signature")
        if string_error:
            return errors
        return len(errors) == 0

    def _validate_cannot_exceed_max_integer(
        self,
        values: Dict[str, int | None],
        bits: int = 256,
        cannot_equal: bool = False,
    ) -> None:
        if bits == 64:
            limit, limit_name = MAX_UINT64, "MAX_UINT64 (2^64-1)"
        elif bits == 256:
            limit, limit_name = MAX_INTEGER, "MAX_INTEGER (2^256-1)"
        else:
            raise ValueError(f"unsupported bit width {bits}")
        for key, value in values.items():
            if value is None:
                continue
            if value < 0:
                raise ValidationError(
                    self.error_message(f"{key} cannot be negative, given {int(value)}")
                )
            if cannot_equal and value >= limit:
                raise ValidationError(
                    self.error_message(
                        f"{key} cannot equal or exceed {limit_name}, given {int(value)}"
                    )
                )
            if value > limit:
                raise ValidationError(
                    self.error_message(f"{key} cannot exceed {limit_name}, given {int(value)}")
                )

    def _validate_high_s(self, error_type: Type[Exception] = ValidationError) -> None:
        if (
            self.s is not None
            and self.s > SECP256K1N_DIV_2
            and self.chain_rules.gte_hardfork("homestead")
        ):
            raise error_type(
                self.error_message(
                    "Invalid Signature: s-values greater than secp256k1n/2 are considered invalid"
                )
            )

    @abstractmethod
    def _validate(self) -> None:
        """Run the checks specific to the transaction type."""
        pass

    # Chain rules

    @abstractmethod
    def _get_chain_rules(self, chain_rules: ChainRules | None) -> ChainRules:
        """Return the chain rules the transaction owns."""
        pass

    def _resolve_chain_rules(
        self, chain_rules: ChainRules | None, chain_id: int | None
    ) -> ChainRules:
        """
        Return a copy of the given chain rules, checked against the chain id, or build chain
        rules for the chain id when none are given.
        """
        if chain_id is not None:
            if chain_rules is not None:
                if chain_rules.chain_id != chain_id:
                    raise ConfigMismatchError(
                        self.error_message(
                            "The chain ID does not match the chain ID of the chain rules"
                        )
                    )
                resolved = chain_rules.copy()
            else:
                config = TransactionConfig()
                if ChainRules.is_supported_chain_id(chain_id):
                    resolved = ChainRules(chain=chain_id, hardfork=config.DEFAULT_HARDFORK)
                else:
                    resolved = ChainRules.custom(
                        chain_id=chain_id,
                        base_chain=config.DEFAULT_CHAIN,
                        hardfork=config.DEFAULT_HARDFORK,
                    )
        elif chain_rules is not None:
            resolved = chain_rules.copy()
        else:
            resolved = ChainRules()
        logger.debug(
            "Resolved chain rules of %s: chain_id=%d hardfork=%s",
            self.__class__.__name__,
            resolved.chain_id,
            resolved.hardfork,
        )
        return resolved

    @abstractmethod
    def _get_active_capabilities(self) -> List[Capability]:
        """Return the capabilities of the transaction."""
        pass

    # Signing

    def get_message_to_sign(self, hash_message: bool = True) -> Any:
        """Return the message to sign, or its keccak256 hash when `hash_message` is set."""
        return self._message_to_sign(hash_message, self.active_capabilities)

    @abstractmethod
    def _message_to_sign(self, hash_message: bool, capabilities: Tuple[Capability, ...]) -> Any:
        pass

    def _signing_capabilities(self) -> Tuple[Capability, ...]:
        return self.active_capabilities

    def sign(self, private_key: bytes | str) -> "BaseTransaction":
        """
        Sign the transaction with the private key and return the signed transaction.

        The transaction itself is not modified.
        """
        try:
            key = to_bytes(private_key)
        except ValueError as e:
            raise KeyFormatError(self.error_message("Private key is not valid hex")) from e
        if len(key) != 32:
            raise KeyFormatError(self.error_message("Private key must be 32 bytes in length."))

        capabilities = self._signing_capabilities()
        msg_hash = self._message_to_sign(True, capabilities)
        try:
            r, s, recovery_id = secp256k1_sign(msg_hash, key)
        except KeyFormatError as e:
            raise KeyFormatError(self.error_message(str(e))) from e

        v = recovery_id + 27
        if Capability.EIP155_REPLAY_PROTECTION in capabilities:
            v += self.chain_rules.chain_id * 2 + 8
        logger.verbose("Signed %s transaction: v=%d", self.type.name, v)
        return self._process_signature(v, r, s)

    @abstractmethod
    def _process_signature(self, v: int, r: int, s: int) -> "BaseTransaction":
        """Return a copy of the transaction carrying the signature."""
        pass

    def _with_signature(self, v: int, r: int, s: int) -> "BaseTransaction":
        tx_data = self.model_dump(exclude={"v", "r", "s"})
        tx_data.update(v=v, r=r, s=s)
        return self.from_tx_data(
            tx_data,
            TxOptions(
                chain_rules=self.chain_rules,
                allow_unlimited_init_code_size=self.tx_options.allow_unlimited_init_code_size,
            ),
        )

    # Signature verification

    def get_message_to_verify_signature(self) -> Hash:
        """Return the hash of the message the signature of the transaction was made over."""
        if not self.is_signed():
            raise SignatureError(self.error_message("This transaction is not signed"))
        return self.get_message_to_sign(True)

    @abstractmethod
    def _recovery_id(self) -> int:
        pass

    def get_sender_public_key(self) -> bytes:
        """Recover the 64-byte public key of the signer."""
        if not self.is_signed():
            raise SignatureError(
                self.error_message("Cannot call this method if transaction is not signed")
            )
        msg_hash = self.get_message_to_verify_signature()
        self._validate_high_s(SignatureError)
        recovery_id = self._recovery_id()
        assert self.r is not None and self.s is not None
        try:
            return secp256k1_recover(self.r, self.s, recovery_id, msg_hash)
        except SignatureError as e:
            raise SignatureError(self.error_message("Invalid Signature")) from e

    def verify_signature(self) -> bool:
        """Return whether the signature recovers to a public key."""
        try:
            public_key = self.get_sender_public_key()
        except SignatureError as e:
            logger.verbose("Signature verification failed: %s", e)
            return False
        return any(public_key)

    def get_sender_address(self) -> Address:
        """Return the address of the signer."""
        return public_key_to_address(self.get_sender_public_key())

    def hash(self) -> Hash:
        """Return the keccak256 hash of the serialized signed transaction."""
        if not self.is_signed():
            raise SignatureError(
                self.error_message("Cannot call hash method if transaction is not signed")
            )
        tx_hash = self._cache.get("hash")
        if tx_hash is None:
            tx_hash = keccak256(self.serialize())
            self._cache["hash"] = tx_hash
        return tx_hash

    # Outbound views

    def raw(self) -> List[Any]:
        """Return the ordered field values as unpadded bytes."""
        return to_raw_element(self.to_list())

    def serialize(self) -> Bytes:
        """Return the canonical RLP serialization of the transaction."""
        return self.rlp()

    def to_json(self) -> Dict[str, Any]:
        """Return the fields as hex strings under camel case keys, omitting absent fields."""
        fields = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        json: Dict[str, Any] = {"type": HexNumber(self.type).hex()}
        for name in self.get_rlp_fields():
            key = to_camel(name)
            if key in fields:
                json[key] = fields[key]
        return json

    # Error annotation

    def _shared_error_postfix(self) -> str:
        try:
            tx_hash = self.hash().hex() if self.is_signed() else "not available (unsigned)"
        except Exception:
            tx_hash = "error"
        try:
            signed = str(self.is_signed()).lower()
        except Exception:
            signed = "error"
        try:
            hardfork = self.chain_rules.hardfork
        except Exception:
            hardfork = "error"
        return (
            f"tx type={int(self.type)} hash={tx_hash} nonce={self.nonce} value={self.value} "
            f"signed={signed} hf={hardfork}"
        )

    @abstractmethod
    def error_str(self) -> str:
        """Return a short description of the transaction, used to annotate errors."""
        pass

    def error_message(self, msg: str) -> str:
        """Annotate the message with the description of the transaction."""
        return f"{msg} ({self.error_str()})"
