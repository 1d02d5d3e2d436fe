"""All Ethereum fork class definitions."""

from dataclasses import replace
from typing import List

from ..base_fork import BaseFork
from ..gas_costs import GasCosts


# All forks must be listed here !!! in the order they were introduced !!!
class Frontier(BaseFork, hardfork_name="chainstart"):
    """Frontier fork."""

    @classmethod
    def gas_costs(cls) -> GasCosts:
        """Return dataclass with the defined gas costs constants for genesis."""
        return GasCosts(
            G_TRANSACTION=21_000,
            G_TRANSACTION_CREATE=32_000,
            G_TX_DATA_ZERO=4,
            G_TX_DATA_NON_ZERO=68,
        )

    @classmethod
    def eips(cls) -> List[int]:
        """At genesis, no EIPs are active."""
        return []


class Homestead(Frontier):
    """Homestead fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """
        At Homestead, signatures with high s values become invalid (EIP-2) and
        DELEGATECALL is introduced (EIP-7).
        """
        return super(Homestead, cls).eips() + [2, 7]


class TangerineWhistle(Homestead):
    """Tangerine Whistle fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Tangerine Whistle, gas costs of IO-heavy operations are repriced."""
        return super(TangerineWhistle, cls).eips() + [150]


class SpuriousDragon(TangerineWhistle):
    """Spurious Dragon fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Spurious Dragon, simple replay attack protection (EIP-155) is introduced."""
        return super(SpuriousDragon, cls).eips() + [155, 160, 161, 170]


class Byzantium(SpuriousDragon):
    """Byzantium fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Byzantium, precompiles and receipt status codes are introduced."""
        return super(Byzantium, cls).eips() + [100, 140, 196, 197, 198, 211, 214, 649, 658]


class Constantinople(Byzantium):
    """Constantinople fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Constantinople, bitwise shifting and CREATE2 are introduced."""
        return super(Constantinople, cls).eips() + [145, 1014, 1052, 1234, 1283]


class ConstantinopleFix(Constantinople, hardfork_name="petersburg"):
    """Constantinople Fix fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Petersburg, net gas metering for SSTORE (EIP-1283) is removed."""
        return [eip for eip in super(ConstantinopleFix, cls).eips() if eip != 1283]


class Istanbul(ConstantinopleFix):
    """Istanbul fork."""

    @classmethod
    def gas_costs(cls) -> GasCosts:
        """
        On Istanbul, the non-zero transaction data byte cost is reduced to 16 due to
        EIP-2028.
        """
        return replace(
            super(Istanbul, cls).gas_costs(),
            G_TX_DATA_NON_ZERO=16,  # https://eips.ethereum.org/EIPS/eip-2028
        )

    @classmethod
    def eips(cls) -> List[int]:
        """At Istanbul, calldata is repriced and CHAINID is introduced."""
        return super(Istanbul, cls).eips() + [152, 1108, 1344, 1884, 2028, 2200]


class MuirGlacier(Istanbul):
    """Muir Glacier fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Muir Glacier, the difficulty bomb is delayed."""
        return super(MuirGlacier, cls).eips() + [2384]


class Berlin(MuirGlacier):
    """Berlin fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Berlin, typed transaction envelopes and access lists are introduced."""
        return super(Berlin, cls).eips() + [2565, 2718, 2929, 2930]


class London(Berlin):
    """London fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At London, the fee market change is introduced."""
        return super(London, cls).eips() + [1559, 3198, 3529, 3541, 3554]


class ArrowGlacier(London):
    """Arrow Glacier fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Arrow Glacier, the difficulty bomb is delayed."""
        return super(ArrowGlacier, cls).eips() + [4345]


class GrayGlacier(ArrowGlacier):
    """Gray Glacier fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Gray Glacier, the difficulty bomb is delayed."""
        return super(GrayGlacier, cls).eips() + [5133]


class Paris(GrayGlacier, hardfork_name="merge"):
    """Paris (Merge) fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Paris, the consensus engine is upgraded to proof-of-stake."""
        return super(Paris, cls).eips() + [3675, 4399]


class Shanghai(Paris):
    """Shanghai fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Shanghai, initcode is limited and metered (EIP-3860)."""
        return super(Shanghai, cls).eips() + [3651, 3855, 3860, 4895]


class Cancun(Shanghai):
    """Cancun fork."""

    @classmethod
    def eips(cls) -> List[int]:
        """At Cancun, transient storage and blob transactions are introduced."""
        return super(Cancun, cls).eips() + [1153, 4788, 4844, 5656, 6780, 7516]
