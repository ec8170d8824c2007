"""
calpick.engines.compare
-----------------------
Calendar-date predicates. Everything compares by (year, month, day);
the time part of a ``datetime`` argument is ignored.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from calpick.core.time import Clock, system_clock
from calpick.core.types import DateRange


class Ordering(Enum):
    BEFORE = -1
    SAME = 0
    AFTER = 1


def as_date(d: date) -> date:
    # datetime is a date subclass but refuses ordering against plain dates
    if isinstance(d, datetime):
        return d.date()
    return d


def compare(a: date, b: date) -> Ordering:
    a, b = as_date(a), as_date(b)
    if a < b:
        return Ordering.BEFORE
    if a > b:
        return Ordering.AFTER
    return Ordering.SAME


def is_same_day(a: Optional[date], b: Optional[date]) -> bool:
    if a is None or b is None:
        return False
    return as_date(a) == as_date(b)


def is_today(d: date, clock: Clock = system_clock) -> bool:
    """True if ``d`` falls on the clock's current local date. The clock is read on every call."""
    return as_date(d) == clock().date()


def is_within_range(d: date, rng: Optional[DateRange]) -> bool:
    """Inclusive at both ends. An open-ended range contains nothing."""
    if rng is None:
        return False
    return rng.contains(as_date(d))
