"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Project root holds the packages (flat layout)
sys.path.insert(0, str(Path(__file__).parent.parent))

from monthpad_calendar.models import DayKey, Event, TimeOfDay
from monthpad_calendar.storage import JsonFileStorage, MemoryStorage
from monthpad_calendar.store import EventStore


def make_event(name: str, start: str, end: str) -> Event:
    return Event(name=name, start=TimeOfDay.parse(start), end=TimeOfDay.parse(end))


@pytest.fixture
def day():
    return DayKey.of(2026, 10, 19)


@pytest.fixture
def memory_store():
    """Store backed by MemoryStorage; inspect store.backend.raw for what was saved."""
    return EventStore.open(MemoryStorage())


@pytest.fixture
def events_file(tmp_path):
    return tmp_path / "data" / "calendar_events.json"


@pytest.fixture
def file_store(events_file):
    return EventStore.open(JsonFileStorage(events_file))


@pytest.fixture
def sample_state():
    """Several days, including keys that would collide if fields were concatenated."""
    return {
        DayKey.of(2026, 10, 19): [
            make_event("Standup", "09:00", "09:15"),
            make_event("Design review", "10:00", "11:30"),
        ],
        DayKey.of(2026, 1, 11): [make_event("Dentist", "14:00", "15:00")],
        DayKey.of(2026, 11, 1): [make_event("Team lunch", "12:00", "13:00")],
        DayKey.of(2024, 2, 29): [make_event("Leap day standup", "09:00", "09:15")],
    }


@pytest.fixture
def event_factory():
    return make_event
