"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

from typing import Any

from memesim.core.exceptions.market import InvalidAmountError, ValidationError
from memesim.core.types.financial import is_finite_positive, to_float


def validate_asset_id(asset_id: Any, param_name: str = "asset_id") -> str:
    """Validate that a value is a non-empty asset id string.

    Args:
        asset_id: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated asset id

    Raises:
        TypeError: If asset_id is not a string
        ValidationError: If asset_id is blank
    """
    if not isinstance(asset_id, str):
        raise TypeError(f"{param_name} must be str, got {type(asset_id).__name__}")
    if not asset_id.strip():
        raise ValidationError(f"{param_name} must not be empty")
    return asset_id


def validate_positive(value: float, param_name: str) -> float:
    """Validate that a numeric value is positive.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated value

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{param_name} must be positive, got {value}")
    return value


def validate_probability(value: float, param_name: str = "probability") -> float:
    """Validate that a value is a probability (0-1).

    Raises:
        ValidationError: If value is not between 0 and 1
    """
    if value < 0 or value > 1:
        raise ValidationError(f"{param_name} must be between 0 and 1, got {value}")
    return value


def parse_dollar_amount(amount: Any) -> float:
    """Parse a user-supplied dollar amount.

    Accepts numbers and numeric strings, mirroring a free-text amount field.

    Args:
        amount: Raw amount

    Returns:
        The amount as a finite positive float

    Raises:
        InvalidAmountError: If the amount is non-numeric, NaN, infinite or <= 0
    """
    if isinstance(amount, bool) or amount is None:
        raise InvalidAmountError(amount)
    try:
        value = to_float(amount)
    except (TypeError, ValueError) as e:
        raise InvalidAmountError(amount) from e
    if not is_finite_positive(value):
        raise InvalidAmountError(amount)
    return value
