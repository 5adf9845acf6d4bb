"""
Simulator exception hierarchy.
"""

from .market import (
    ConfigurationError,
    EmptyHoldingError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerError,
    MemesimException,
    UnknownAssetError,
    ValidationError,
)

__all__ = [
    "MemesimException",
    "ValidationError",
    "InvalidAmountError",
    "ConfigurationError",
    "UnknownAssetError",
    "LedgerError",
    "InsufficientFundsError",
    "EmptyHoldingError",
]
