"""
Unit tests for Holding and SaleResult domain models.
"""

import pytest

from memesim.core.exceptions.market import ValidationError
from memesim.core.models.holding import Holding, SaleResult


class TestHolding:
    """Test Holding validation and valuation."""

    def test_should_compute_cost_basis_and_value(self) -> None:
        holding = Holding(asset_id="clawstr", quantity=1000.0, average_cost_basis=0.004)
        assert holding.cost_basis == pytest.approx(4.0)
        assert holding.market_value(0.002) == pytest.approx(2.0)
        assert holding.unrealized_pnl(0.002) == pytest.approx(-2.0)

    @pytest.mark.parametrize("quantity", [0.0, -1.0])
    def test_should_reject_non_positive_quantity(self, quantity: float) -> None:
        with pytest.raises(ValidationError, match="Quantity must be positive"):
            Holding(asset_id="clawstr", quantity=quantity, average_cost_basis=1.0)

    def test_should_reject_negative_cost_basis(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            Holding(asset_id="clawstr", quantity=1.0, average_cost_basis=-0.1)

    def test_should_serialize(self) -> None:
        holding = Holding(asset_id="clawd", quantity=2.0, average_cost_basis=3.0)
        assert holding.to_dict() == {
            "asset_id": "clawd",
            "quantity": 2.0,
            "average_cost_basis": 3.0,
            "cost_basis": 6.0,
        }


class TestSaleResult:
    """Test SaleResult classification."""

    def test_should_flag_losing_sale(self) -> None:
        result = SaleResult("a", 10.0, 1.0, 10.0, 20.0, -10.0)
        assert result.is_rekt

    def test_should_not_flag_break_even_sale(self) -> None:
        result = SaleResult("a", 10.0, 2.0, 20.0, 20.0, 0.0)
        assert not result.is_rekt
