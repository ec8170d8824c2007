# tests/test_compare.py

from datetime import date, datetime, timedelta

from calpick.core.time import FixedClock
from calpick.core.types import DateRange
from calpick.engines.compare import Ordering, compare, is_same_day, is_today, is_within_range


def test_same_day_ignores_time():
    assert is_same_day(datetime(2024, 3, 1, 23, 59), date(2024, 3, 1))
    assert not is_same_day(date(2024, 3, 1), date(2024, 3, 2))
    assert not is_same_day(None, date(2024, 3, 1))


def test_compare():
    assert compare(date(2024, 3, 1), date(2024, 3, 2)) is Ordering.BEFORE
    assert compare(date(2024, 3, 2), date(2024, 3, 1)) is Ordering.AFTER
    assert compare(datetime(2024, 3, 1, 8), datetime(2024, 3, 1, 20)) is Ordering.SAME


def test_is_today_reads_clock_each_call():
    clock = FixedClock(datetime(2024, 3, 15, 23, 59, 59))
    assert is_today(date(2024, 3, 15), clock)
    clock.advance(timedelta(seconds=1))
    assert not is_today(date(2024, 3, 15), clock)
    assert is_today(datetime(2024, 3, 16, 12), clock)


def test_within_range_is_inclusive():
    rng = DateRange(date(2024, 3, 10), date(2024, 3, 20))
    assert is_within_range(date(2024, 3, 10), rng)
    assert is_within_range(date(2024, 3, 20), rng)
    assert is_within_range(datetime(2024, 3, 15, 6), rng)
    assert not is_within_range(date(2024, 3, 9), rng)
    assert not is_within_range(date(2024, 3, 21), rng)


def test_open_range_contains_nothing():
    assert not is_within_range(date(2024, 3, 10), DateRange(date(2024, 3, 10)))
    assert not is_within_range(date(2024, 3, 10), None)
