"""
Asset domain model.
"""

from dataclasses import dataclass, field

from memesim.core.exceptions.market import ValidationError
from memesim.core.types.financial import ZERO, percent_change


@dataclass(frozen=True)
class Asset:
    """A listed fictional asset with its current price and recent history.

    Assets are immutable snapshots: every tick produces a new instance, so a
    reader holding an Asset never observes a half-updated price/history pair.
    """

    id: str
    display_name: str
    ticker: str
    price: float
    price_history: tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate asset data after initialization."""
        if not self.id:
            raise ValidationError("Asset id must not be empty")
        if self.price <= ZERO:
            raise ValidationError(f"Price must be positive, got {self.price}")

    @property
    def percent_change(self) -> float:
        """Change of the current price against the oldest retained price, in percent.

        Returns 0.0 while the history holds fewer than two points.
        """
        if len(self.price_history) < 2:
            return ZERO
        return percent_change(self.price, self.price_history[0])

    def to_dict(self) -> dict:
        """Convert asset to dictionary."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "ticker": self.ticker,
            "price": self.price,
            "percent_change": self.percent_change,
            "price_history": list(self.price_history),
        }
