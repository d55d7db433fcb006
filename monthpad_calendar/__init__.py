from monthpad_calendar.errors import AddResult, PersistenceError, ValidationError
from monthpad_calendar.grid import (
    WEEK_LABELS,
    CalendarGrid,
    build_grid,
    days_in_month,
    first_weekday,
    month_title,
    shift_month,
)
from monthpad_calendar.models import DayKey, Event, EventDraft, TimeOfDay
from monthpad_calendar.storage import JsonFileStorage, MemoryStorage, StorageBackend
from monthpad_calendar.store import EventStore

__all__ = [
    "AddResult",
    "CalendarGrid",
    "DayKey",
    "Event",
    "EventDraft",
    "EventStore",
    "JsonFileStorage",
    "MemoryStorage",
    "PersistenceError",
    "StorageBackend",
    "TimeOfDay",
    "ValidationError",
    "WEEK_LABELS",
    "build_grid",
    "days_in_month",
    "first_weekday",
    "month_title",
    "shift_month",
]
