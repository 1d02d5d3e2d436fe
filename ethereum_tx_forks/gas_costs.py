"""Defines the data class that will contain transaction gas cost constants on each fork."""

from dataclasses import dataclass


@dataclass(kw_only=True, frozen=True)
class GasCosts:
    """Class that contains the transaction gas cost constants for any fork."""

    G_TRANSACTION: int
    G_TRANSACTION_CREATE: int
    G_TX_DATA_ZERO: int
    G_TX_DATA_NON_ZERO: int

    def gas_prices(self) -> dict[str, int]:
        """Return the costs keyed by their name in the `gasPrices` parameter topic."""
        return {
            "tx": self.G_TRANSACTION,
            "txCreation": self.G_TRANSACTION_CREATE,
            "txDataZero": self.G_TX_DATA_ZERO,
            "txDataNonZero": self.G_TX_DATA_NON_ZERO,
        }
