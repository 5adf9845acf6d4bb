"""
Bounded, append-only transaction log.
"""

import itertools
from collections import deque
from datetime import UTC, datetime

from loguru import logger

from memesim.core.constants import LOG_RETENTION
from memesim.core.enums import LogKind
from memesim.core.models.log_entry import LogEntry
from memesim.core.utils.validation import validate_positive


class TransactionLog:
    """Keeps the most recent ledger events for user feedback.

    Sequence ids keep increasing after old entries are evicted, so the
    retained entries are always strictly ordered by ``sequence_id``.
    """

    def __init__(self, retention: int = LOG_RETENTION) -> None:
        self.retention = int(validate_positive(retention, "retention"))
        self._entries: deque[LogEntry] = deque()
        self._sequence = itertools.count(1)

    def append(self, message: str, kind: LogKind) -> LogEntry:
        """Record a new event.

        Args:
            message: Text shown to the user
            kind: Entry category

        Returns:
            The created entry
        """
        entry = LogEntry(
            sequence_id=next(self._sequence),
            message=message,
            kind=LogKind(kind),
            created_at=datetime.now(UTC),
        )
        self._entries.append(entry)

        while len(self._entries) > self.retention:
            self._entries.popleft()

        logger.debug(f"[{entry.kind.value}] #{entry.sequence_id} {entry.message}")
        return entry

    def entries(self) -> tuple[LogEntry, ...]:
        """Get retained entries, oldest first."""
        return tuple(self._entries)

    def latest(self) -> LogEntry | None:
        """Get the most recent entry, if any."""
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)
