# Storage backends for the day -> events mapping
#
# On-disk shape: one JSON object keyed by unpadded "{year}-{month}-{day}",
# key order = day insertion order:
#   {
#     "2026-10-19": [{"name": "Standup", "startTime": "09:00", "endTime": "09:15"}],
#     "2026-1-11":  [...]
#   }

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from monthpad_calendar.errors import PersistenceError
from monthpad_calendar.models import DayKey, Event
from utils.config import CONFIG
from utils.persistence import load_json, save_json

logger = logging.getLogger(__name__)

State = Dict[DayKey, List[Event]]


class CorruptStateError(ValueError):
    pass


class StorageBackend(Protocol):
    def load(self) -> State: ...

    def save(self, state: State) -> None: ...


def dump_state(state: State) -> Dict[str, List[Dict[str, str]]]:
    """Serialize to the JSON-ready shape. Empty days are dropped."""
    return {str(key): [ev.to_record() for ev in events] for key, events in state.items() if events}


def parse_state(raw: Any) -> State:
    """Inverse of dump_state. Raises CorruptStateError on anything unexpected."""
    if not isinstance(raw, dict):
        raise CorruptStateError(f"expected an object, got {type(raw).__name__}")
    out: State = {}
    seen = set()
    for key_str, records in raw.items():
        if not isinstance(records, list):
            raise CorruptStateError(f"events for {key_str!r} are not a list")
        try:
            key = DayKey.parse(key_str)
            events = [Event.from_record(rec) for rec in records]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise CorruptStateError(f"bad entry {key_str!r}: {e}") from e
        for i, ev in enumerate(events):
            for earlier in events[:i]:
                if earlier.overlaps(ev.start, ev.end):
                    raise CorruptStateError(f"overlapping events on {key}: {earlier} and {ev}")
        if key in seen:
            # "2026-01-09" and "2026-1-9" name the same day
            raise CorruptStateError(f"duplicate day {key}")
        seen.add(key)
        if events:
            out[key] = events
    return out


class JsonFileStorage:
    """Whole mapping in one JSON file, rewritten on every save."""

    def __init__(self, path: str | Path | None = None, lock_timeout: Optional[float] = None):
        self.path = Path(path or CONFIG["storage"]["path"])
        self.lock_timeout = lock_timeout

    def load(self) -> State:
        try:
            raw = load_json(self.path, default={})
            state = parse_state(raw)
        except (OSError, ValueError, RecursionError, CorruptStateError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.warning("Ignoring unreadable event file %s: %s", self.path, e)
            return {}
        logger.debug("Loaded %d day(s) from %s", len(state), self.path)
        return state

    def save(self, state: State) -> None:
        try:
            save_json(self.path, dump_state(state), timeout=self.lock_timeout)
        except (OSError, TimeoutError) as e:
            raise PersistenceError(f"could not write {self.path}: {e}") from e


class MemoryStorage:
    """Keeps the serialized form in memory; handy for tests and dry runs."""

    def __init__(self, raw: Optional[Dict[str, Any]] = None):
        self.raw: Any = raw if raw is not None else {}
        self.saves = 0

    def load(self) -> State:
        try:
            return parse_state(self.raw)
        except CorruptStateError as e:
            logger.warning("Ignoring corrupt in-memory state: %s", e)
            return {}

    def save(self, state: State) -> None:
        # Round-trip through JSON text so saved data matches what a file would hold
        self.raw = json.loads(json.dumps(dump_state(state)))
        self.saves += 1
