# Minimal CLI over the month grid + event store

import argparse
import sys
from datetime import MAXYEAR, MINYEAR, date
from typing import Dict, List, Optional

from monthpad_calendar.grid import WEEK_LABELS, build_grid, month_title, shift_month
from monthpad_calendar.models import DayKey, Event, EventDraft
from monthpad_calendar.storage import JsonFileStorage
from monthpad_calendar.store import EventStore
from utils.config import CONFIG
from utils.logs import configure_logging

CELL = 5  # width of one day column


def is_today(year: int, month: int, day: Optional[int], today: Optional[date] = None) -> bool:
    if day is None:
        return False
    today = today or date.today()
    return (today.year, today.month, today.day) == (year, month, day)


def _open_store(args) -> EventStore:
    return EventStore.open(JsonFileStorage(args.data))


def _day_key(text: str) -> DayKey:
    try:
        return DayKey.parse(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a valid day: {text!r} (use YYYY-M-D)")


def render_month(year: int, month: int, marked: set, today: Optional[date] = None) -> List[str]:
    """Text rows for a month: title, weekday header, then one row per week."""
    marker = CONFIG["display"]["event_marker"]
    lines = [month_title(year, month).center(CELL * 7).rstrip()]
    lines.append("".join(label.center(CELL) for label in WEEK_LABELS).rstrip())
    for week in build_grid(year, month):
        cells = []
        for day in week:
            if day is None:
                cells.append(" " * CELL)
                continue
            text = f"{day:2d}"
            if is_today(year, month, day, today):
                text = f"[{text}]"
            if day in marked:
                text += marker
            cells.append(text.center(CELL))
        lines.append("".join(cells).rstrip())
    return lines


def _print_events(events: List[Event], indent: str = "") -> None:
    for e in events:
        print(f"{indent}{e}")


def cmd_month(args):
    # year/month already resolved and range-checked by main()
    year, month = args.year, args.month
    store = _open_store(args)
    marked = store.days_with_events(year, month, args.filter)
    for line in render_month(year, month, marked, date.today()):
        print(line)


def cmd_day(args):
    store = _open_store(args)
    events = store.events_for_day(args.date, args.filter)
    print(f"Events for {args.date}:")
    if not events:
        print("  (none)")
    _print_events(events, indent="  ")


def cmd_list(args):
    store = _open_store(args)
    by_day: Dict[DayKey, List[Event]] = store.filter_by_keyword(args.filter)
    for key in sorted(by_day):
        print(f"{key}")
        _print_events(by_day[key], indent="  ")


def cmd_add(args):
    store = _open_store(args)
    draft = EventDraft(name=args.name, start_time=args.start, end_time=args.end)
    res = store.add_event(args.date, draft)
    if not res.ok:
        print(res.error.message, file=sys.stderr)
        return 1
    print(f"Added: {res.event} on {args.date}")
    if res.persistence_error is not None:
        print(f"Warning: event not saved ({res.persistence_error})", file=sys.stderr)
        return 2
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="monthpad: month calendar with per-day events")
    p.add_argument("--data", default=CONFIG["storage"]["path"],
                   help="Path to the events JSON file")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING, ... (default from config)")
    sub = p.add_subparsers(required=True)

    sp = sub.add_parser("month", help="Show a month grid")
    sp.add_argument("--year", type=int)
    sp.add_argument("--month", type=int, help="1-12 (defaults to current month)")
    sp.add_argument("--offset", type=int, default=0, help="Months forward/back, e.g. -1 for previous")
    sp.add_argument("--filter", default="", help="Only mark days with events matching this keyword")
    sp.set_defaults(func=cmd_month)

    sp = sub.add_parser("day", help="List a day's events")
    sp.add_argument("date", type=_day_key, help="YYYY-M-D or YYYY-MM-DD")
    sp.add_argument("--filter", default="")
    sp.set_defaults(func=cmd_day)

    sp = sub.add_parser("list", help="List all days with events")
    sp.add_argument("--filter", default="")
    sp.set_defaults(func=cmd_list)

    sp = sub.add_parser("add", help="Add an event to a day")
    sp.add_argument("date", type=_day_key, help="YYYY-M-D or YYYY-MM-DD")
    sp.add_argument("name")
    sp.add_argument("start", help="HH:MM (24h)")
    sp.add_argument("end", help="HH:MM (24h)")
    sp.set_defaults(func=cmd_add)

    return p


def _resolve_month(p: argparse.ArgumentParser, args) -> None:
    """Fill in year/month defaults and apply --offset, or exit with a usage error."""
    today = date.today()
    year = args.year if args.year is not None else today.year
    month = args.month if args.month is not None else today.month
    if not 1 <= month <= 12:
        p.error("--month must be between 1 and 12")
    if not MINYEAR <= year <= MAXYEAR:
        p.error(f"--year must be between {MINYEAR} and {MAXYEAR}")
    try:
        args.year, args.month = shift_month(year, month, args.offset)
    except ValueError as e:
        p.error(f"--offset {args.offset} leaves the supported range: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    configure_logging(args.log_level)
    if args.func is cmd_month:
        _resolve_month(p, args)
    return args.func(args) or 0


if __name__ == "__main__":
    sys.exit(main())
