# Event store: per-day events with validation, overlap checks, filtering

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Set, Tuple, Union

from monthpad_calendar.errors import AddResult, PersistenceError, ValidationError
from monthpad_calendar.models import DayKey, Event, EventDraft, TimeOfDay
from monthpad_calendar.storage import JsonFileStorage, State, StorageBackend

logger = logging.getLogger(__name__)

Draft = Union[EventDraft, dict]


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class EventStore:
    """
    Owns the DayKey -> [Event] mapping.

    Events are only ever added (never edited or removed), each day keeps
    insertion order, and every successful add is written through to the
    storage backend.
    """

    def __init__(self, backend: Optional[StorageBackend] = None, state: Optional[State] = None):
        self.backend: StorageBackend = backend if backend is not None else JsonFileStorage()
        self._events: State = {}
        if state is not None:
            self._events = {k: list(v) for k, v in state.items() if v}

    @classmethod
    def open(cls, backend: Optional[StorageBackend] = None) -> "EventStore":
        store = cls(backend)
        store.load()
        return store

    # -------------------------
    # Persistence
    # -------------------------
    def load(self) -> None:
        self._events = self.backend.load()

    def save(self) -> None:
        self.backend.save(self._events)

    # -------------------------
    # Reads
    # -------------------------
    @property
    def state(self) -> State:
        return {k: list(v) for k, v in self._events.items()}

    def events_for_day(self, day_key: DayKey, keyword: str = "") -> List[Event]:
        events = self._events.get(day_key, [])
        if keyword:
            needle = keyword.casefold()
            events = [e for e in events if needle in e.name.casefold()]
        return list(events)

    def filter_by_keyword(self, keyword: str) -> State:
        """Days whose events match keyword (case-insensitive); everything if keyword is empty."""
        if not keyword:
            return self.state
        out: State = {}
        for key in self._events:
            matches = self.events_for_day(key, keyword)
            if matches:
                out[key] = matches
        return out

    def days_with_events(self, year: int, month: int, keyword: str = "") -> Set[int]:
        return {
            key.day
            for key, events in self.filter_by_keyword(keyword).items()
            if key.year == year and key.month == month and events
        }

    # -------------------------
    # Writes
    # -------------------------
    def check_event(self, day_key: DayKey, draft: Draft) -> Tuple[Optional[Event], Optional[ValidationError]]:
        """Validate a draft against the day without changing anything."""
        if isinstance(draft, dict):
            draft = EventDraft(**draft)

        if _blank(draft.name) or _blank(draft.start_time) or _blank(draft.end_time):
            return None, ValidationError.MISSING_FIELD

        try:
            start = TimeOfDay.parse(draft.start_time)
            end = TimeOfDay.parse(draft.end_time)
        except ValueError:
            return None, ValidationError.MALFORMED_TIME

        if start >= end:
            return None, ValidationError.INVALID_RANGE

        for existing in self._events.get(day_key, []):
            if existing.overlaps(start, end):
                logger.debug("%s %s-%s overlaps %s on %s", draft.name, start, end, existing, day_key)
                return None, ValidationError.OVERLAP_CONFLICT

        return Event(name=draft.name.strip(), start=start, end=end), None

    def add_event(self, day_key: DayKey, draft: Draft) -> AddResult:
        event, error = self.check_event(day_key, draft)
        if error is not None:
            logger.warning("Rejected event on %s: %s", day_key, error.message)
            return AddResult(error=error)

        self._events.setdefault(day_key, []).append(event)
        logger.info("Added %s on %s", event, day_key)

        try:
            self.save()
        except PersistenceError as e:
            # In-memory add stands; caller decides how loudly to report it
            logger.error("Event added but not saved: %s", e)
            return AddResult(event=event, persistence_error=e)
        return AddResult(event=event)
