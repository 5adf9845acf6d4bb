"""
Shared test fixtures: deterministic random sources and price sources.
"""

from collections.abc import Iterable

import pytest

from memesim.core.exceptions.market import UnknownAssetError
from memesim.core.models.asset import Asset
from memesim.core.models.config import AssetListing, SimulationConfig


class ScriptedRandom:
    """Random source that replays scripted draws.

    ``random()`` replays ``randoms`` then returns 0.99 (never a pump).
    ``uniform(low, high)`` replays ``uniforms`` then returns the midpoint.
    """

    def __init__(self, randoms: Iterable[float] = (), uniforms: Iterable[float] = ()) -> None:
        self.randoms = list(randoms)
        self.uniforms = list(uniforms)
        self.uniform_calls: list[tuple[float, float]] = []

    def random(self) -> float:
        return self.randoms.pop(0) if self.randoms else 0.99

    def uniform(self, low: float, high: float) -> float:
        self.uniform_calls.append((low, high))
        return self.uniforms.pop(0) if self.uniforms else (low + high) / 2


class StaticPrices:
    """Price source with manually set prices."""

    def __init__(self, prices: dict[str, float]) -> None:
        self._prices = dict(prices)

    def set_price(self, asset_id: str, price: float) -> None:
        self._prices[asset_id] = price

    def has_asset(self, asset_id: str) -> bool:
        return asset_id in self._prices

    def get_asset(self, asset_id: str) -> Asset:
        if asset_id not in self._prices:
            raise UnknownAssetError(asset_id)
        return Asset(
            id=asset_id,
            display_name=asset_id.upper(),
            ticker=f"${asset_id.upper()}",
            price=self._prices[asset_id],
        )

    def get_price(self, asset_id: str) -> float:
        return self.get_asset(asset_id).price

    def prices(self) -> dict[str, float]:
        return dict(self._prices)


@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    """Random source with no scripted draws (midpoints, no pumps)."""
    return ScriptedRandom()


@pytest.fixture
def rng_factory() -> type[ScriptedRandom]:
    """Factory for random sources with scripted draws."""
    return ScriptedRandom


@pytest.fixture
def static_prices() -> StaticPrices:
    """Price source listing clawstr at 0.00420 and clawd at 0.01337."""
    return StaticPrices({"clawstr": 0.00420, "clawd": 0.01337})


@pytest.fixture
def halving_config() -> SimulationConfig:
    """Config whose every tick exactly halves every price."""
    return SimulationConfig(pump_probability=0.0, drift_center=0.5, drift_spread=0.0, seed=7)


@pytest.fixture
def single_listing() -> tuple[AssetListing, ...]:
    """One listing: clawstr at 0.00420."""
    return (
        AssetListing(id="clawstr", display_name="CLAWSTR", ticker="$CLAWSTR", starting_price=0.00420),
    )
