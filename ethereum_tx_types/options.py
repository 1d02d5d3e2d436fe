"""Options given to a transaction on construction."""

from ethereum_tx_base_types import CamelModel
from ethereum_tx_forks import ChainRules


class TxOptions(CamelModel):
    """Options given to a transaction on construction."""

    chain_rules: ChainRules | None = None
    """
    Chain rules the transaction is checked against. The transaction keeps its own copy, so
    later changes to this instance do not affect it.
    """

    allow_unlimited_init_code_size: bool = False
    """Skip the EIP-3860 init code size limit for contract creations."""
