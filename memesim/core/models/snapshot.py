"""
Read-only market snapshot handed to presentation adapters.
"""

from dataclasses import dataclass

from memesim.core.enums import RektLevel
from memesim.core.models.asset import Asset
from memesim.core.models.holding import Holding
from memesim.core.models.log_entry import LogEntry


@dataclass(frozen=True)
class MarketSnapshot:
    """Everything a renderer needs for one frame."""

    tick: int
    assets: tuple[Asset, ...]
    cash_balance: float
    holdings: tuple[Holding, ...]
    portfolio_value: float
    unrealized_loss: float
    rekt_level: RektLevel
    log: tuple[LogEntry, ...]

    @property
    def total_value(self) -> float:
        """Cash plus market value of open holdings."""
        return self.cash_balance + self.portfolio_value

    def to_dict(self) -> dict:
        """Convert snapshot to dictionary."""
        return {
            "tick": self.tick,
            "assets": [asset.to_dict() for asset in self.assets],
            "cash_balance": self.cash_balance,
            "holdings": [holding.to_dict() for holding in self.holdings],
            "portfolio_value": self.portfolio_value,
            "total_value": self.total_value,
            "unrealized_loss": self.unrealized_loss,
            "rekt_level": self.rekt_level.value,
            "log": [entry.to_dict() for entry in self.log],
        }
