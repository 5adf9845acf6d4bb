"""
Unrealized loss tracker.

The tracked figure is recomputed from scratch on every price or holdings
change, but it is only overwritten while the current loss is positive.
When holdings are at break-even or in profit the previous figure is kept,
so a recovered portfolio (or one whose losers were sold) keeps showing the
last positive loss.
"""

from collections.abc import Iterable, Mapping

from memesim.core.constants import SHOCK_THRESHOLD
from memesim.core.models.holding import Holding
from memesim.core.types.financial import ZERO


def invested_value(holdings: Iterable[Holding]) -> float:
    """Total cost basis of the given holdings."""
    return sum((holding.cost_basis for holding in holdings), ZERO)


def current_value(holdings: Iterable[Holding], prices: Mapping[str, float]) -> float:
    """Market value of the given holdings; unpriced assets count as zero."""
    return sum(
        (holding.market_value(prices[holding.asset_id])
         for holding in holdings
         if holding.asset_id in prices),
        ZERO,
    )


class UnrealizedLossTracker:
    """Holds the displayed unrealized loss figure."""

    def __init__(self, shock_threshold: float = SHOCK_THRESHOLD) -> None:
        self.shock_threshold = shock_threshold
        self.value = ZERO

    def recompute(self, holdings: Iterable[Holding], prices: Mapping[str, float]) -> float | None:
        """Recompute the loss from holdings and current prices.

        Args:
            holdings: Open holdings
            prices: Current prices keyed by asset id

        Returns:
            The upward jump when it exceeds the shock threshold, otherwise None
        """
        holdings = list(holdings)
        loss = invested_value(holdings) - current_value(holdings, prices)
        if loss <= ZERO:
            return None

        jump = loss - self.value
        self.value = loss
        return jump if jump > self.shock_threshold else None
