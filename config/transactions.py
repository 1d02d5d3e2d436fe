"""
A module for managing transaction defaults.

Classes:
- TransactionConfig: Holds the chain and hard-fork used when a transaction is built
  without explicit chain rules.
"""

from pydantic import BaseModel


class TransactionConfig(BaseModel):
    """A class for accessing transaction-related configurations."""

    DEFAULT_CHAIN: str = "mainnet"
    """The chain used when neither a chain id nor chain rules are given."""

    DEFAULT_HARDFORK: str = "merge"
    """The hard-fork used when the chain rules are derived from a chain id or the defaults."""

    CUSTOM_CHAIN_NAME: str = "custom-chain"
    """The name given to chains built from a chain id that is not a supported chain."""
