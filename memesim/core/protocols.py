"""
Core type definitions and protocols.

This module defines shared protocols so the ledger and the price engine can
depend on each other's behaviour without importing concrete classes.
"""

from typing import Protocol

from memesim.core.models.asset import Asset


class RandomSource(Protocol):
    """Protocol for the injectable random number source.

    ``numpy.random.Generator`` satisfies it; tests may pass a scripted stub.
    """

    def random(self) -> float:
        """Return a float drawn uniformly from [0, 1)."""
        ...

    def uniform(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from [low, high)."""
        ...


class PriceSource(Protocol):
    """Protocol for read-only access to current asset prices."""

    def get_asset(self, asset_id: str) -> Asset:
        """Return the current asset, raising UnknownAssetError if absent."""
        ...

    def get_price(self, asset_id: str) -> float:
        """Return the current price, raising UnknownAssetError if absent."""
        ...

    def has_asset(self, asset_id: str) -> bool:
        """Check whether an asset id is listed."""
        ...

    def prices(self) -> "PriceDict":
        """Return current prices keyed by asset id."""
        ...


# Type aliases for commonly used types
PriceDict = dict[str, float]
