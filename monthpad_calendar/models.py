# Day keys, times of day and events

from __future__ import annotations
import re
from datetime import MAXYEAR, MINYEAR
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from monthpad_calendar.grid import days_in_month

_HHMM = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")
_DAY_KEY = re.compile(r"^([0-9]+)-([0-9]+)-([0-9]+)$")
_MINUTES_PER_DAY = 24 * 60


class DayKey(BaseModel):
    """One calendar day. Month and day are 1-indexed."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=MINYEAR, le=MAXYEAR)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1)

    @model_validator(mode="after")
    def _day_in_month(self) -> "DayKey":
        last = days_in_month(self.year, self.month)
        if self.day > last:
            raise ValueError(f"day {self.day} out of range for {self.year}-{self.month} (max {last})")
        return self

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "DayKey":
        return cls(year=year, month=month, day=day)

    @classmethod
    def parse(cls, text: str) -> "DayKey":
        """Accepts the storage form (2026-1-9) and ISO dates (2026-01-09)."""
        m = _DAY_KEY.match(text.strip())
        if not m:
            raise ValueError(f"not a day key: {text!r}")
        return cls.of(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        # Unpadded; fields are '-'-separated so 2026-1-11 and 2026-11-1 stay distinct
        return f"{self.year}-{self.month}-{self.day}"

    def __lt__(self, other: "DayKey") -> bool:
        return self.as_tuple() < other.as_tuple()


class TimeOfDay(BaseModel):
    """Wall-clock time with minute granularity, no date or timezone."""

    model_config = ConfigDict(frozen=True)

    minutes: int = Field(ge=0, lt=_MINUTES_PER_DAY)  # since midnight

    @classmethod
    def parse(cls, raw: str) -> "TimeOfDay":
        """Parse 24h 'HH:MM'. Raises ValueError on anything else."""
        m = _HHMM.match(raw.strip())
        if not m:
            raise ValueError(f"not an HH:MM time: {raw!r}")
        hour, minute = int(m.group(1)), int(m.group(2))
        if hour > 23 or minute > 59:
            raise ValueError(f"not an HH:MM time: {raw!r}")
        return cls(minutes=hour * 60 + minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def __lt__(self, other: "TimeOfDay") -> bool:
        return self.minutes < other.minutes

    def __le__(self, other: "TimeOfDay") -> bool:
        return self.minutes <= other.minutes

    def __gt__(self, other: "TimeOfDay") -> bool:
        return self.minutes > other.minutes

    def __ge__(self, other: "TimeOfDay") -> bool:
        return self.minutes >= other.minutes


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    start: TimeOfDay
    end: TimeOfDay

    @model_validator(mode="after")
    def _name_and_range(self) -> "Event":
        if not self.name.strip():
            raise ValueError("event name is blank")
        if self.start >= self.end:
            raise ValueError(f"start {self.start} is not before end {self.end}")
        return self

    def overlaps(self, start: TimeOfDay, end: TimeOfDay) -> bool:
        # Half-open [start, end): touching intervals don't overlap
        return start < self.end and end > self.start

    def to_record(self) -> dict:
        return {"name": self.name, "startTime": str(self.start), "endTime": str(self.end)}

    @classmethod
    def from_record(cls, rec: dict) -> "Event":
        return cls(
            name=rec["name"],
            start=TimeOfDay.parse(rec["startTime"]),
            end=TimeOfDay.parse(rec["endTime"]),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.start} - {self.end})"


class EventDraft(BaseModel):
    """Raw form input, not yet validated."""

    name: Optional[str] = None
    start_time: Optional[str] = None  # HH:MM
    end_time: Optional[str] = None    # HH:MM
