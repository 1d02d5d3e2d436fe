"""
Chain rules: the chain identity, hard-fork and extra EIPs a transaction is checked against.
"""

from typing import Any, List

from pydantic import ConfigDict, Field, field_validator

from config import TransactionConfig
from ethereum_tx_base_types import CamelModel

from .chains import Chain, get_chain, is_supported_chain_id
from .eips import EIP_PARAMETERS
from .helpers import Fork, fork_validator_generator, get_forks

fork_validator = fork_validator_generator("Fork", get_forks())


class ChainRules(CamelModel):
    """
    Scoped chain configuration.

    The chain can be given by name, chain id or as a `Chain` model, and the hard-fork by fork
    class, class name (`Paris`) or hard-fork name (`merge`). EIPs listed in `eips` are active on
    top of those the hard-fork includes.
    """

    model_config = ConfigDict(validate_assignment=True)

    chain: Chain = Field(default_factory=lambda: TransactionConfig().DEFAULT_CHAIN)
    fork: Fork = Field(
        default_factory=lambda: TransactionConfig().DEFAULT_HARDFORK,
        alias="hardfork",
    )
    eips: List[int] = Field(default_factory=list)

    @field_validator("chain", mode="before")
    @classmethod
    def validate_chain(cls, value: Any) -> Any:
        """Resolve chain names and chain ids to the supported chain."""
        if isinstance(value, (str, int)):
            return get_chain(value)
        return value

    @classmethod
    def custom(
        cls,
        *,
        chain_id: int,
        network_id: int | None = None,
        name: str | None = None,
        base_chain: str | None = None,
        hardfork: Any = None,
        eips: List[int] | None = None,
    ) -> "ChainRules":
        """
        Create chain rules for a chain that is not supported, derived from one of the supported
        chains.
        """
        config = TransactionConfig()
        base = get_chain(base_chain if base_chain is not None else config.DEFAULT_CHAIN)
        chain = Chain(
            name=name if name is not None else config.CUSTOM_CHAIN_NAME,
            chain_id=chain_id,
            network_id=network_id if network_id is not None else chain_id,
            base_chain=base.name,
        )
        return cls(
            chain=chain,
            fork=hardfork if hardfork is not None else config.DEFAULT_HARDFORK,
            eips=eips or [],
        )

    @staticmethod
    def is_supported_chain_id(chain_id: int) -> bool:
        """Return whether the chain id belongs to one of the supported chains."""
        return is_supported_chain_id(chain_id)

    @property
    def chain_id(self) -> int:
        """Chain id of the configured chain."""
        return self.chain.chain_id

    @property
    def network_id(self) -> int:
        """Network id of the configured chain."""
        return self.chain.network_id

    @property
    def hardfork(self) -> str:
        """Name of the configured hard-fork."""
        return self.fork.hardfork_name()

    def set_hardfork(self, hardfork: Any) -> None:
        """Switch to another hard-fork; unknown names raise `InvalidForkError`."""
        self.fork = hardfork

    def gte_hardfork(self, hardfork: Any) -> bool:
        """Return whether the configured hard-fork is at or after the given one."""
        return self.fork >= fork_validator(hardfork)

    def activated_eips(self) -> List[int]:
        """Return the EIPs of the hard-fork followed by the extra EIPs."""
        fork_eips = self.fork.eips()
        return fork_eips + [eip for eip in self.eips if eip not in fork_eips]

    def is_activated_eip(self, eip: int) -> bool:
        """Return whether the EIP is active, either as an extra EIP or through the hard-fork."""
        return eip in self.eips or eip in self.fork.eips()

    def param(self, topic: str, name: str) -> int | None:
        """
        Return the value of a parameter, or `None` when no active rule defines it.

        Values of the hard-fork's gas cost table are overridden by the parameters of the
        activated EIPs, in activation order.
        """
        value: int | None = None
        if topic == "gasPrices":
            value = self.fork.gas_costs().gas_prices().get(name)
        for eip in self.activated_eips():
            eip_parameters = EIP_PARAMETERS.get(eip, {}).get(topic, {})
            if name in eip_parameters:
                value = eip_parameters[name]
        return value
