# Month grid generation (Sunday-first weeks) + month navigation helpers
#
# Months are 1-indexed everywhere in this package (1=January … 12=December).
# A grid is a list of 7-slot weeks; slots outside the month are None.

from __future__ import annotations
import calendar
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import List, Optional, Tuple

CalendarGrid = List[List[Optional[int]]]

DAYS_PER_WEEK = 7
SATURDAY = 6  # last slot; Sunday is slot 0
WEEK_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def _check_month(year: int, month: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f"year {year} out of range {MINYEAR}..{MAXYEAR}")
    if not 1 <= month <= 12:
        raise ValueError(f"month {month} out of range 1..12")


def days_in_month(year: int, month: int) -> int:
    """Day-of-month of the day before the 1st of the following month."""
    _check_month(year, month)
    if month == 12:
        # December always has 31; also avoids date(MAXYEAR + 1, ...)
        return 31
    return (date(year, month + 1, 1) - timedelta(days=1)).day


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st, 0=Sunday … 6=Saturday."""
    _check_month(year, month)
    # date.weekday() is Mon=0 … Sun=6
    return (date(year, month, 1).weekday() + 1) % DAYS_PER_WEEK


def build_grid(year: int, month: int) -> CalendarGrid:
    """
    Lay out a month as Sunday-first weeks.

    The first week is padded with None before day 1, the last week after the
    final day. A week is closed once its Saturday slot is filled or the
    month's last day has been placed.
    """
    total = days_in_month(year, month)
    offset = first_weekday(year, month)

    grid: CalendarGrid = []
    week: List[Optional[int]] = [None] * DAYS_PER_WEEK
    for day in range(1, total + 1):
        slot = (offset + day - 1) % DAYS_PER_WEEK
        week[slot] = day
        if slot == SATURDAY or day == total:
            grid.append(week)
            week = [None] * DAYS_PER_WEEK
    return grid


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move delta months forward (negative = back), rolling over years."""
    _check_month(year, month)
    idx = year * 12 + (month - 1) + delta
    new_year, new_month = divmod(idx, 12)
    new_month += 1
    _check_month(new_year, new_month)
    return new_year, new_month


def month_title(year: int, month: int) -> str:
    _check_month(year, month)
    return f"{calendar.month_name[month]} {year}"
