"""
Shock reason enumerations.

This module defines why a transient shock signal was raised.
"""

from enum import StrEnum

from memesim.core.constants import LOSS_SHOCK_DURATION_MS, REKT_SELL_SHOCK_DURATION_MS


class ShockReason(StrEnum):
    """
    Causes of a shock signal.

    LOSS_JUMP fires when the loss metric rises sharply in one recomputation,
    REKT_SELL fires when a position is liquidated at a loss.
    """

    LOSS_JUMP = "loss_jump"
    REKT_SELL = "rekt_sell"

    @classmethod
    def duration_ms(cls, reason: "ShockReason") -> int:
        """
        Get how long the presentation should display the shock.

        Args:
            reason: Shock reason enum value

        Returns:
            Duration in milliseconds
        """
        durations = {
            cls.LOSS_JUMP: LOSS_SHOCK_DURATION_MS,
            cls.REKT_SELL: REKT_SELL_SHOCK_DURATION_MS,
        }
        return durations[reason]
