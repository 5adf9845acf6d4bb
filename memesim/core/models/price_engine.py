"""
Price engine: procedural, loss-biased price generation.

This module owns every asset's current price and bounded history. Prices
follow a multiplicative random walk with a downward drift and occasional
pumps. The module-level functions are pure given a random source; the
PriceEngine class keeps the current assets and applies them on each tick.
"""

from collections.abc import Iterable

from loguru import logger

from memesim.core.exceptions.market import UnknownAssetError
from memesim.core.models.asset import Asset
from memesim.core.models.config import AssetListing, SimulationConfig
from memesim.core.protocols import PriceDict, RandomSource
from memesim.core.types.financial import ONE, floor_price

_DEFAULT_CONFIG = SimulationConfig()


def seed_history(
    starting_price: float, rng: RandomSource, config: SimulationConfig = _DEFAULT_CONFIG
) -> list[float]:
    """Generate a declining-with-noise backstory for a freshly listed asset.

    Starts above the listing price and walks down so the asset looks like it
    already fell before the user arrived.

    Args:
        starting_price: Listing price of the asset
        rng: Random source
        config: Simulation parameters

    Returns:
        ``config.history_window`` prices, oldest first
    """
    floor = starting_price * config.seed_floor_ratio
    current = starting_price * config.seed_start_multiplier
    history = []
    for _ in range(config.history_window):
        multiplier = config.seed_bias + float(rng.uniform(-config.seed_spread, config.seed_spread))
        current = floor_price(current * multiplier, floor)
        history.append(current)
    return history


def draw_multiplier(
    rng: RandomSource, config: SimulationConfig = _DEFAULT_CONFIG
) -> tuple[float, bool]:
    """Draw the price multiplier for one asset for one tick.

    Returns:
        Tuple of (multiplier, is_pump)
    """
    if float(rng.random()) < config.pump_probability:
        return ONE + float(rng.uniform(0.0, config.pump_max_gain)), True
    spread = config.drift_spread
    return config.drift_center + float(rng.uniform(-spread, spread)), False


def advance(asset: Asset, rng: RandomSource, config: SimulationConfig = _DEFAULT_CONFIG) -> Asset:
    """Advance one asset by one tick.

    Args:
        asset: Current asset state
        rng: Random source
        config: Simulation parameters

    Returns:
        New Asset with the next price appended to a history trimmed to the window
    """
    multiplier, is_pump = draw_multiplier(rng, config)
    new_price = floor_price(asset.price * multiplier, config.price_floor)
    history = (*asset.price_history, new_price)[-config.history_window :]

    if is_pump:
        logger.debug(f"Pump on {asset.ticker}: x{multiplier:.4f} -> {new_price:.8f}")

    return Asset(
        id=asset.id,
        display_name=asset.display_name,
        ticker=asset.ticker,
        price=new_price,
        price_history=history,
    )


class PriceEngine:
    """Owns the listed assets and advances them on external ticks.

    The engine has no timer of its own; a scheduler (or a test) calls tick().
    """

    def __init__(
        self,
        listings: Iterable[AssetListing],
        rng: RandomSource,
        config: SimulationConfig = _DEFAULT_CONFIG,
    ) -> None:
        """Seed every listing with its synthetic history.

        Args:
            listings: Assets to list, in display order
            rng: Random source shared by seeding and ticks
            config: Simulation parameters
        """
        self.rng = rng
        self.config = config
        self.ticks = 0
        self._assets: dict[str, Asset] = {}

        for listing in listings:
            self._assets[listing.id] = Asset(
                id=listing.id,
                display_name=listing.display_name,
                ticker=listing.ticker,
                price=listing.starting_price,
                price_history=tuple(seed_history(listing.starting_price, rng, config)),
            )

        logger.debug(f"Price engine seeded {len(self._assets)} assets")

    def tick(self) -> tuple[Asset, ...]:
        """Advance every asset one step and return the new assets."""
        self._assets = {
            asset_id: advance(asset, self.rng, self.config)
            for asset_id, asset in self._assets.items()
        }
        self.ticks += 1
        return self.get_assets()

    def get_assets(self) -> tuple[Asset, ...]:
        """Get the current assets in listing order."""
        return tuple(self._assets.values())

    def has_asset(self, asset_id: str) -> bool:
        """Check whether an asset id is listed."""
        return asset_id in self._assets

    def get_asset(self, asset_id: str) -> Asset:
        """Get one asset.

        Raises:
            UnknownAssetError: If the asset is not listed
        """
        try:
            return self._assets[asset_id]
        except KeyError:
            raise UnknownAssetError(asset_id) from None

    def get_price(self, asset_id: str) -> float:
        """Get the current price of one asset.

        Raises:
            UnknownAssetError: If the asset is not listed
        """
        return self.get_asset(asset_id).price

    def prices(self) -> PriceDict:
        """Get current prices keyed by asset id."""
        return {asset_id: asset.price for asset_id, asset in self._assets.items()}
