"""
Transaction log entry kinds.

This module defines the categories used to colour ledger feedback.
"""

from enum import StrEnum


class LogKind(StrEnum):
    """
    Allowed transaction log entry kinds.

    A rejected buy and a losing sell are both reported as REKT.
    """

    BUY = "buy"
    SELL = "sell"
    REKT = "rekt"
    INFO = "info"

    @property
    def is_trade(self) -> bool:
        """Check if the entry records an executed or attempted trade."""
        return self in [self.BUY, self.SELL, self.REKT]
