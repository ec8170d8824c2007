"""
calpick.engines.format
----------------------
Locale-fixed display text for picker values, and the matching parser.

    date      01-Mar-2024
    time      09:05:03
    datetime  01-Mar-2024 09:05:03
    range     01-Mar-2024 - 15-Mar-2024   (or "01-Mar-2024 - To")
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional

from calpick.core.errors import FormatParseError
from calpick.core.types import DateRange

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

RANGE_SEP = " - "
OPEN_END = "To"

_DATE_RE = re.compile(r"^(\d{2})-([A-Za-z]{3})-(\d{4})$")
_TIME_RE = re.compile(r"^(\d{2}):(\d{2}):(\d{2})$")


def format_date(d: date) -> str:
    return f"{d.day:02d}-{MONTH_ABBR[d.month - 1]}-{d.year:04d}"


def format_time(t: time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"


def format_datetime(dt: datetime) -> str:
    return f"{format_date(dt)} {format_time(dt.time())}"


def format_range(start: date, end: Optional[date] = None) -> str:
    tail = format_date(end) if end is not None else OPEN_END
    return f"{format_date(start)}{RANGE_SEP}{tail}"


def format_date_range(rng: DateRange) -> str:
    return format_range(rng.start, rng.end)


def format_month_label(d: date) -> str:
    """Grid header, e.g. ``Mar 2024``."""
    return f"{MONTH_ABBR[d.month - 1]} {d.year}"


# ------------------------------------------------------------
# Parsing
# ------------------------------------------------------------

def parse_date(text: str) -> date:
    m = _DATE_RE.match(text.strip())
    if not m:
        raise FormatParseError(f"Expected DD-Mon-YYYY, got {text!r}")
    day, mon, year = m.groups()
    try:
        month = [a.lower() for a in MONTH_ABBR].index(mon.lower()) + 1
    except ValueError:
        raise FormatParseError(f"Unknown month abbreviation {mon!r} in {text!r}") from None
    try:
        return date(int(year), month, int(day))
    except ValueError as e:
        raise FormatParseError(f"Invalid date {text!r}: {e}") from None


def parse_time(text: str) -> time:
    m = _TIME_RE.match(text.strip())
    if not m:
        raise FormatParseError(f"Expected HH:MM:SS, got {text!r}")
    try:
        return time(*map(int, m.groups()))
    except ValueError as e:
        raise FormatParseError(f"Invalid time {text!r}: {e}") from None


def parse_datetime(text: str) -> datetime:
    parts = text.strip().split(" ")
    if len(parts) != 2:
        raise FormatParseError(f"Expected 'DD-Mon-YYYY HH:MM:SS', got {text!r}")
    return datetime.combine(parse_date(parts[0]), parse_time(parts[1]))


def parse_range(text: str) -> DateRange:
    parts = text.strip().split(RANGE_SEP)
    if len(parts) != 2:
        raise FormatParseError(f"Expected 'start - end', got {text!r}")
    start = parse_date(parts[0])
    if parts[1].strip() == OPEN_END:
        return DateRange(start)
    end = parse_date(parts[1])
    if end < start:
        raise FormatParseError(f"Range end precedes start in {text!r}")
    return DateRange(start, end)
