"""Chains known to the chain rules, identified by name or chain id."""

from typing import Dict, List

from pydantic import ConfigDict

from ethereum_tx_base_types import CamelModel


class UnsupportedChainError(Exception):
    """Raised when a chain is requested by a name or chain id that is not supported."""

    def __init__(self, message):
        """Initialize the UnsupportedChainError exception."""
        super().__init__(message)


class Chain(CamelModel):
    """Identity of a chain: its name, chain id and network id."""

    model_config = ConfigDict(frozen=True)

    name: str
    chain_id: int
    network_id: int
    base_chain: str | None = None


SUPPORTED_CHAINS: List[Chain] = [
    Chain(name="mainnet", chain_id=1, network_id=1),
    Chain(name="goerli", chain_id=5, network_id=5),
    Chain(name="sepolia", chain_id=11155111, network_id=11155111),
    Chain(name="holesky", chain_id=17000, network_id=17000),
]

chains_by_name: Dict[str, Chain] = {chain.name: chain for chain in SUPPORTED_CHAINS}
chains_by_id: Dict[int, Chain] = {chain.chain_id: chain for chain in SUPPORTED_CHAINS}


def get_chain(identifier: str | int) -> Chain:
    """Return the supported chain with the given name or chain id."""
    if isinstance(identifier, str) and identifier in chains_by_name:
        return chains_by_name[identifier]
    if isinstance(identifier, int) and identifier in chains_by_id:
        return chains_by_id[identifier]
    raise UnsupportedChainError(f"Chain with name or id {identifier} not supported")


def is_supported_chain_id(chain_id: int) -> bool:
    """Return whether the chain id belongs to one of the supported chains."""
    return chain_id in chains_by_id
