"""
Unit tests for financial helpers.
"""

import math

import pytest

from memesim.core.types.financial import (
    calculate_pnl,
    floor_price,
    format_price,
    format_units,
    format_usd,
    is_finite_positive,
    percent_change,
    safe_float_comparison,
    to_float,
    weighted_average_cost,
)


class TestConversion:
    """Test numeric conversion."""

    def test_should_convert_numbers_and_strings(self) -> None:
        assert to_float(50) == 50.0
        assert to_float(" 1.5 ") == 1.5
        assert to_float(2.25) == 2.25

    def test_should_reject_non_numeric_string(self) -> None:
        with pytest.raises(ValueError):
            to_float("lots")

    def test_should_detect_finite_positive(self) -> None:
        assert is_finite_positive(0.01)
        assert not is_finite_positive(0.0)
        assert not is_finite_positive(-3.0)
        assert not is_finite_positive(math.nan)
        assert not is_finite_positive(math.inf)


class TestPriceMath:
    """Test price calculations."""

    def test_should_floor_price(self) -> None:
        assert floor_price(1e-12, 1e-8) == 1e-8
        assert floor_price(0.5, 1e-8) == 0.5

    def test_should_compute_percent_change(self) -> None:
        assert percent_change(150.0, 100.0) == pytest.approx(50.0)
        assert percent_change(50.0, 100.0) == pytest.approx(-50.0)

    def test_should_return_zero_change_for_non_positive_reference(self) -> None:
        assert percent_change(10.0, 0.0) == 0.0

    def test_should_merge_weighted_average(self) -> None:
        # 100 units at 1.0, then $300 buys 150 units at 2.0
        assert weighted_average_cost(1.0, 100.0, 300.0, 150.0) == pytest.approx(400.0 / 250.0)

    def test_should_compute_long_pnl(self) -> None:
        assert calculate_pnl(2.0, 1.0, 10.0) == pytest.approx(-10.0)
        assert calculate_pnl(1.0, 3.0, 10.0) == pytest.approx(20.0)


class TestFormatting:
    """Test display formatting."""

    def test_should_format_price_with_eight_decimals(self) -> None:
        assert format_price(0.0042) == "$0.00420000"

    def test_should_format_usd_and_units(self) -> None:
        assert format_usd(50) == "$50.00"
        assert format_units(23809.5238) == "23809.52"


class TestComparison:
    """Test float comparison helper."""

    def test_should_compare_with_tolerance(self) -> None:
        assert safe_float_comparison(0.1 + 0.2, 0.3)
        assert not safe_float_comparison(0.3, 0.31)
