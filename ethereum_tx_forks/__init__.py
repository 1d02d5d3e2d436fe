"""
Ethereum fork definitions and chain rules.
"""

from .base_fork import BaseFork
from .chain_rules import ChainRules
from .chains import SUPPORTED_CHAINS, Chain, UnsupportedChainError, get_chain
from .eips import EIP_PARAMETERS
from .forks.forks import (
    ArrowGlacier,
    Berlin,
    Byzantium,
    Cancun,
    Constantinople,
    ConstantinopleFix,
    Frontier,
    GrayGlacier,
    Homestead,
    Istanbul,
    London,
    MuirGlacier,
    Paris,
    Shanghai,
    SpuriousDragon,
    TangerineWhistle,
)
from .gas_costs import GasCosts
from .helpers import Fork, InvalidForkError, get_fork_by_name, get_forks

__all__ = [
    "ArrowGlacier",
    "BaseFork",
    "Berlin",
    "Byzantium",
    "Cancun",
    "Chain",
    "ChainRules",
    "Constantinople",
    "ConstantinopleFix",
    "EIP_PARAMETERS",
    "Fork",
    "Frontier",
    "GasCosts",
    "GrayGlacier",
    "Homestead",
    "InvalidForkError",
    "Istanbul",
    "London",
    "MuirGlacier",
    "Paris",
    "SUPPORTED_CHAINS",
    "Shanghai",
    "SpuriousDragon",
    "TangerineWhistle",
    "UnsupportedChainError",
    "get_chain",
    "get_fork_by_name",
    "get_forks",
]
