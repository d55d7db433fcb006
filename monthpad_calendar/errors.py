# Error kinds reported by the event store

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from monthpad_calendar.models import Event


class ValidationError(str, Enum):
    """Why an event was rejected. Returned to the caller, never raised."""

    MISSING_FIELD = "missing_field"
    MALFORMED_TIME = "malformed_time"
    INVALID_RANGE = "invalid_range"
    OVERLAP_CONFLICT = "overlap_conflict"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ValidationError.MISSING_FIELD: "Please fill in all fields.",
    ValidationError.MALFORMED_TIME: "Times must be in HH:MM format.",
    ValidationError.INVALID_RANGE: "End time must be after start time.",
    ValidationError.OVERLAP_CONFLICT: "This event overlaps with an existing event.",
}


class PersistenceError(Exception):
    """Storage backend could not write (or lock) the event file."""


@dataclass(frozen=True)
class AddResult:
    event: Optional["Event"] = None
    error: Optional[ValidationError] = None
    # Set when the event was added in memory but saving it failed
    persistence_error: Optional[PersistenceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def saved(self) -> bool:
        return self.ok and self.persistence_error is None
