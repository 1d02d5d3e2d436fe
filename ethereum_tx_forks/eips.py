"""
Parameters introduced by individual EIPs, keyed by EIP number, parameter topic and
parameter name.

Parameters of an EIP apply once the EIP is activated, either by the hard-fork that
includes it or as an extra EIP on top of a hard-fork.
"""

from typing import Dict

EipParameters = Dict[str, Dict[str, int]]

EIP_PARAMETERS: Dict[int, EipParameters] = {
    # Optional access lists
    2930: {
        "gasPrices": {
            "accessListStorageKeyCost": 1_900,
            "accessListAddressCost": 2_400,
        },
    },
    # Limit and meter initcode
    3860: {
        "gasPrices": {
            "initCodeWordCost": 2,
        },
        "vm": {
            "maxInitCodeSize": 49_152,
        },
    },
}
