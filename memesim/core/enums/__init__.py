"""
Core enumerations for the market simulator.

This module provides centralized enumerations for domain concepts
like log entry kinds, rekt tiers and shock reasons.
"""

from .log_kinds import LogKind
from .rekt_levels import RektLevel
from .shock_reasons import ShockReason

__all__ = ["LogKind", "RektLevel", "ShockReason"]
