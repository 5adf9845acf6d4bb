"""
Infrastructure module for scheduling and data export.
"""

from .history_frame import history_summary, price_history_frame
from .scheduler import TickScheduler

__all__ = ["TickScheduler", "price_history_frame", "history_summary"]
