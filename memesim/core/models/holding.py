"""
Holding and sale result domain models.
"""

from dataclasses import dataclass

from memesim.core.exceptions.market import ValidationError
from memesim.core.types.financial import ZERO, calculate_pnl


@dataclass(frozen=True)
class Holding:
    """An open position in one asset.

    A holding only exists while its quantity is positive; the ledger replaces
    it on every merge and drops it on sell.
    """

    asset_id: str
    quantity: float
    average_cost_basis: float

    def __post_init__(self) -> None:
        """Validate holding data after initialization."""
        if self.quantity <= ZERO:
            raise ValidationError(f"Quantity must be positive, got {self.quantity}")
        if self.average_cost_basis < ZERO:
            raise ValidationError(
                f"Average cost basis must be non-negative, got {self.average_cost_basis}"
            )

    @property
    def cost_basis(self) -> float:
        """Total amount paid: quantity x average purchase price."""
        return self.quantity * self.average_cost_basis

    def market_value(self, current_price: float) -> float:
        """Value of the position at the given price."""
        return self.quantity * current_price

    def unrealized_pnl(self, current_price: float) -> float:
        """PnL the position would realize if sold at the given price."""
        return calculate_pnl(self.average_cost_basis, current_price, self.quantity)

    def to_dict(self) -> dict:
        """Convert holding to dictionary."""
        return {
            "asset_id": self.asset_id,
            "quantity": self.quantity,
            "average_cost_basis": self.average_cost_basis,
            "cost_basis": self.cost_basis,
        }


@dataclass(frozen=True)
class SaleResult:
    """Outcome of liquidating a whole holding."""

    asset_id: str
    quantity: float
    price: float
    proceeds: float
    cost_basis: float
    pnl: float

    @property
    def is_rekt(self) -> bool:
        """Check if the sale realized a loss."""
        return self.pnl < ZERO
