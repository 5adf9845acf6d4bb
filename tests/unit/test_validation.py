"""
Unit tests for validation utilities.
"""

import math

import pytest

from memesim.core.exceptions.market import InvalidAmountError, ValidationError
from memesim.core.utils.validation import (
    parse_dollar_amount,
    validate_asset_id,
    validate_positive,
    validate_probability,
)


class TestValidateAssetId:
    """Test asset id validation."""

    def test_should_accept_string(self) -> None:
        assert validate_asset_id("clawstr") == "clawstr"

    def test_should_reject_non_string(self) -> None:
        with pytest.raises(TypeError, match="asset_id must be str"):
            validate_asset_id(42)

    def test_should_reject_blank(self) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            validate_asset_id("   ")


class TestValidateNumbers:
    """Test numeric validators."""

    def test_should_validate_positive(self) -> None:
        assert validate_positive(1.5, "amount") == 1.5
        with pytest.raises(ValidationError, match="amount must be positive"):
            validate_positive(0, "amount")

    def test_should_validate_probability(self) -> None:
        assert validate_probability(0.0) == 0.0
        assert validate_probability(1.0) == 1.0
        with pytest.raises(ValidationError, match="between 0 and 1"):
            validate_probability(1.2)


class TestParseDollarAmount:
    """Test user amount parsing."""

    @pytest.mark.parametrize(("raw", "expected"), [(100, 100.0), ("25.5", 25.5), (" 3 ", 3.0)])
    def test_should_parse_valid_amounts(self, raw: object, expected: float) -> None:
        assert parse_dollar_amount(raw) == expected

    @pytest.mark.parametrize(
        "raw", [-5, 0, "0", "abc", "", math.nan, "nan", math.inf, "-inf", None, True, [1]]
    )
    def test_should_reject_invalid_amounts(self, raw: object) -> None:
        with pytest.raises(InvalidAmountError):
            parse_dollar_amount(raw)
