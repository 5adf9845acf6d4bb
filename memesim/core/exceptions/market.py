"""
Custom exception hierarchy for the market simulator.

This module defines domain-specific exceptions for better error handling.
"""


class MemesimException(Exception):
    """Base exception for all simulator errors."""

    pass


class ValidationError(MemesimException):
    """Raised when input validation fails."""

    pass


class InvalidAmountError(ValidationError):
    """Raised when a buy amount is not a finite positive number."""

    def __init__(self, amount: object):
        self.amount = amount
        super().__init__(f"Invalid dollar amount: {amount!r}")


class ConfigurationError(MemesimException):
    """Raised when configuration is invalid."""

    pass


class UnknownAssetError(MemesimException):
    """Raised when a command references an asset that is not listed."""

    def __init__(self, asset_id: str):
        self.asset_id = asset_id
        super().__init__(f"Unknown asset: {asset_id}")


class LedgerError(MemesimException):
    """Raised when portfolio ledger operations fail."""

    pass


class InsufficientFundsError(LedgerError):
    """Raised when a buy costs more than the available cash."""

    def __init__(self, required: float, available: float, ticker: str):
        self.required = required
        self.available = available
        self.ticker = ticker
        super().__init__(
            f"Insufficient funds for {ticker}: required={required:.2f}, available={available:.2f}"
        )


class EmptyHoldingError(LedgerError):
    """Raised when selling an asset with no open position."""

    def __init__(self, asset_id: str):
        self.asset_id = asset_id
        super().__init__(f"No holding to sell for asset: {asset_id}")
