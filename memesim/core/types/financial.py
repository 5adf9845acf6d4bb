"""
Financial helpers for the simulated market.

All amounts are plain floats. The simulator trades in tiny unit prices
(fractions of a cent) against a dollar balance, so prices are never rounded
internally; rounding only happens when values are formatted for display.
"""

import math

# Display precision (number of decimal places)
PRICE_DISPLAY_DECIMALS = 8  # Meme coin prices are fractions of a cent
AMOUNT_DISPLAY_DECIMALS = 2  # Dollar amounts and unit counts

# Common financial values as float constants
ZERO = 0.0
ONE = 1.0
HUNDRED = 100.0


def to_float(value: str | int | float) -> float:
    """Convert various numeric types to float.

    Args:
        value: Numeric value to convert

    Returns:
        Float representation of the value

    Raises:
        ValueError: If a string does not hold a number

    Examples:
        >>> to_float(50)
        50.0
        >>> to_float(' 1.5 ')
        1.5
    """
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def floor_price(price: float, floor: float) -> float:
    """Clamp a price to a strictly positive floor."""
    return max(price, floor)


def percent_change(current: float, reference: float) -> float:
    """Calculate percent change of current against a reference price.

    Args:
        current: Current price
        reference: Reference (oldest) price

    Returns:
        Change in percent, 0.0 when the reference is not positive
    """
    if reference <= ZERO:
        return ZERO
    return (current - reference) / reference * HUNDRED


def weighted_average_cost(
    old_average: float, old_quantity: float, dollars_added: float, units_added: float
) -> float:
    """Merge a new purchase into a cost-weighted average price.

    Args:
        old_average: Existing average cost basis
        old_quantity: Existing quantity
        dollars_added: Dollars spent on the new purchase
        units_added: Units received by the new purchase

    Returns:
        New average cost basis
    """
    return (old_average * old_quantity + dollars_added) / (old_quantity + units_added)


def calculate_pnl(entry_price: float, exit_price: float, quantity: float) -> float:
    """Calculate PnL of a long position; positions are never short here."""
    return (exit_price - entry_price) * abs(quantity)


def is_finite_positive(value: float) -> bool:
    """Check that a float is neither NaN, infinite nor <= 0."""
    return math.isfinite(value) and value > ZERO


def format_price(price: float) -> str:
    """Format a unit price for display, e.g. '$0.00420000'."""
    return f"${price:.{PRICE_DISPLAY_DECIMALS}f}"


def format_usd(amount: float) -> str:
    """Format a dollar amount for display, e.g. '$50.00'."""
    return f"${amount:.{AMOUNT_DISPLAY_DECIMALS}f}"


def format_units(quantity: float) -> str:
    """Format a unit quantity for display, e.g. '23809.52'."""
    return f"{quantity:.{AMOUNT_DISPLAY_DECIMALS}f}"


def safe_float_comparison(a: float, b: float, tolerance: float = 1e-9) -> bool:
    """Compare floats with a relative tolerance for precision issues."""
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)
