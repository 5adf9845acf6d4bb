"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    AMOUNT_DISPLAY_DECIMALS,
    HUNDRED,
    ONE,
    PRICE_DISPLAY_DECIMALS,
    ZERO,
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

__all__ = [
    # Utility functions
    "to_float",
    "floor_price",
    "percent_change",
    "weighted_average_cost",
    "calculate_pnl",
    "is_finite_positive",
    "format_price",
    "format_usd",
    "format_units",
    "safe_float_comparison",
    # Constants
    "AMOUNT_DISPLAY_DECIMALS",
    "PRICE_DISPLAY_DECIMALS",
    "ZERO",
    "ONE",
    "HUNDRED",
]
