"""
Rekt level enumerations.

This module maps the unrealized loss metric onto a user-facing status tier.
"""

from enum import StrEnum

from memesim.core.constants import GETTING_REKT_THRESHOLD, MEGA_REKT_THRESHOLD


class RektLevel(StrEnum):
    """
    Status tiers derived from the unrealized loss metric.

    Thresholds are exclusive: a loss of exactly 100 is still NOT_YET_REKT.
    """

    NOT_YET_REKT = "not_yet_rekt"
    GETTING_REKT = "getting_rekt"
    MEGA_REKT = "mega_rekt"

    @classmethod
    def from_loss(cls, loss: float) -> "RektLevel":
        """
        Classify a loss metric value.

        Args:
            loss: Current unrealized loss metric

        Returns:
            Matching RektLevel
        """
        if loss > MEGA_REKT_THRESHOLD:
            return cls.MEGA_REKT
        if loss > GETTING_REKT_THRESHOLD:
            return cls.GETTING_REKT
        return cls.NOT_YET_REKT

    @property
    def label(self) -> str:
        """Display label, e.g. 'MEGA REKT'."""
        return self.value.replace("_", " ").upper()
