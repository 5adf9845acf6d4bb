"""
Transaction log entry domain model.
"""

from dataclasses import dataclass
from datetime import datetime

from memesim.core.enums import LogKind
from memesim.core.exceptions.market import ValidationError


@dataclass(frozen=True)
class LogEntry:
    """Represents an immutable ledger event shown to the user."""

    sequence_id: int
    message: str
    kind: LogKind
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if self.sequence_id <= 0:
            raise ValidationError(f"Sequence id must be positive, got {self.sequence_id}")

    def to_dict(self) -> dict:
        """Convert entry to dictionary."""
        return {
            "sequence_id": self.sequence_id,
            "message": self.message,
            "kind": self.kind.value,
            "created_at": self.created_at.isoformat(),
        }
