from __future__ import annotations

import calendar as pycal
from datetime import date, datetime, timedelta
from typing import Callable

# A clock is any zero-argument callable returning the local wall-clock time.
Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local date-time of the host."""
    return datetime.now()


class FixedClock:
    """Clock frozen at a given instant. Mostly useful in tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


def today(clock: Clock = system_clock) -> date:
    return clock().date()


def days_in_month(year: int, month: int) -> int:
    """Number of days in the Gregorian ``month`` of ``year`` (leap-aware)."""
    return pycal.monthrange(year, month)[1]


def first_weekday(d: date) -> int:
    """Weekday of the 1st of ``d``'s month, Sunday-first (0=Sun .. 6=Sat)."""
    return (d.replace(day=1).weekday() + 1) % 7


def month_start(d: date) -> date:
    return date(d.year, d.month, 1)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return (year, month) moved by ``delta`` months, wrapping years."""
    k = year * 12 + (month - 1) + delta
    return k // 12, k % 12 + 1


def add_months(d: date, delta: int) -> date:
    """
    Calendar month arithmetic with day-of-month overflow.

    The day number is kept and any excess over the target month's length
    rolls into the following month: 2023-03-31 minus one month is
    "2023-02-31", i.e. 2023-03-03. ``datetime`` inputs keep their time.
    """
    y, m = shift_month(d.year, d.month, delta)
    return d.replace(year=y, month=m, day=1) + timedelta(days=d.day - 1)


# Months whose full 6-week grid stays inside date.min .. date.max.
# January 0001 would need December 0000, December 9999 would need January 10000.
FIRST_GRID_MONTH = date(1, 2, 1)
LAST_GRID_MONTH = date(9999, 11, 1)


def clamp_month(d: date) -> date:
    """1st of ``d``'s month, pulled back inside the buildable grid range."""
    return max(FIRST_GRID_MONTH, min(LAST_GRID_MONTH, month_start(d)))
