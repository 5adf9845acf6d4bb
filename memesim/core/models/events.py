"""
Shock events and the Observer Pattern used to publish them.

A shock is a short-lived presentation cue (the glitch effect), not ledger
state. The ledger publishes ShockEvents through a MarketEventSubject and
presentation adapters subscribe observers such as ShockMonitor.
"""

import weakref
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from loguru import logger

from memesim.core.enums import ShockReason


@dataclass(frozen=True)
class ShockEvent:
    """A transient shock signal with how long it should be displayed."""

    reason: ShockReason
    magnitude: float
    duration_ms: int
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, reason: ShockReason, magnitude: float) -> "ShockEvent":
        """Create an event using the default display duration for its reason."""
        return cls(reason=reason, magnitude=magnitude, duration_ms=ShockReason.duration_ms(reason))

    @property
    def expires_at(self) -> datetime:
        """Moment the shock stops being displayed."""
        return self.created_at + timedelta(milliseconds=self.duration_ms)

    def to_dict(self) -> dict:
        """Convert event to dictionary."""
        return {
            "reason": self.reason.value,
            "magnitude": self.magnitude,
            "duration_ms": self.duration_ms,
            "created_at": self.created_at.isoformat(),
        }


class MarketEventObserver(Protocol):
    """Protocol for shock event observers."""

    def notify(self, event: ShockEvent) -> None:
        """Handle shock event notification."""
        ...


class MarketEventSubject:
    """Subject class implementing the Observer Pattern for shock events."""

    def __init__(self) -> None:
        """Initialize observer management using weak references."""
        self._observers: weakref.WeakSet[MarketEventObserver] = weakref.WeakSet()

    def add_observer(self, observer: MarketEventObserver) -> None:
        """Add an observer to the notification list."""
        self._observers.add(observer)
        logger.debug(f"Added market observer: {type(observer).__name__}")

    def remove_observer(self, observer: MarketEventObserver) -> None:
        """Remove an observer from the notification list."""
        self._observers.discard(observer)
        logger.debug(f"Removed market observer: {type(observer).__name__}")

    def notify_observers(self, event: ShockEvent) -> None:
        """Notify all observers of a shock event."""
        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            try:
                observer.notify(event)
            except Exception as e:
                logger.error(f"Observer notification failed: {e}")


class ShockMonitor:
    """Observer that remembers the latest shock for polling presenters."""

    def __init__(self) -> None:
        self.last_event: ShockEvent | None = None
        self.total_shocks = 0

    def notify(self, event: ShockEvent) -> None:
        """Handle shock event."""
        self.last_event = event
        self.total_shocks += 1

    def is_active(self, now: datetime | None = None) -> bool:
        """Check if the latest shock should still be displayed."""
        if self.last_event is None:
            return False
        now = now or datetime.now(UTC)
        return now < self.last_event.expires_at
