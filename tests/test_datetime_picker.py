# tests/test_datetime_picker.py

from datetime import date, datetime, time
from unittest.mock import Mock

from calpick.engines.datetime_picker import DateTimePicker

from conftest import cell_for


def test_open_without_commit_uses_clock(clock):
    p = DateTimePicker(clock=clock, placeholder="Select Date & Time")
    snap = p.open()
    assert snap.month == date(2024, 3, 1)
    assert snap.draft_date is None
    assert snap.draft is None
    assert snap.draft_time == time(8, 30, 45)
    assert snap.text == "Select Date & Time"


def test_compose_and_apply(clock):
    cb = Mock()
    p = DateTimePicker(clock=clock, on_commit=cb)
    snap = p.open()
    snap = p.select_day(cell_for(snap, date(2024, 3, 1)))
    assert snap.is_open  # selecting a day does not close
    p.set_time_field("hours", "9")
    p.set_time_field("minutes", "5")
    snap = p.set_time_field("seconds", "3")
    assert snap.draft == datetime(2024, 3, 1, 9, 5, 3)
    cb.assert_not_called()

    assert p.apply()
    snap = p.snapshot()
    assert not snap.is_open
    assert snap.committed == datetime(2024, 3, 1, 9, 5, 3)
    assert snap.text == "01-Mar-2024 09:05:03"
    cb.assert_called_once_with(datetime(2024, 3, 1, 9, 5, 3))


def test_select_day_keeps_time_of_day(clock):
    p = DateTimePicker(initial=datetime(2024, 3, 10, 22, 15, 0), clock=clock)
    snap = p.open()
    snap = p.select_day(cell_for(snap, date(2024, 3, 12)))
    assert snap.draft == datetime(2024, 3, 12, 22, 15, 0)
    assert p.is_selected(date(2024, 3, 12))
    assert not p.is_selected(date(2024, 3, 10))


def test_time_fields_clamp(clock):
    p = DateTimePicker(initial=datetime(2024, 3, 10, 23, 59, 0), clock=clock)
    p.open()
    p.adjust_time_field("hours", 1)
    p.adjust_time_field("minutes", 1)
    assert p.snapshot().draft_time == time(23, 59, 0)


def test_apply_without_day_stays_open(clock):
    cb = Mock()
    p = DateTimePicker(clock=clock, on_commit=cb)
    p.open()
    p.adjust_time_field("hours", 1)
    assert not p.apply()
    assert p.is_open
    cb.assert_not_called()


def test_cancel_restores_committed(clock):
    cb = Mock()
    committed = datetime(2023, 12, 31, 18, 0, 0)
    p = DateTimePicker(initial=committed, clock=clock, on_commit=cb)
    snap = p.open()
    p.navigate_month(1)
    p.select_day(cell_for(p.snapshot(), date(2024, 1, 2)))
    p.adjust_time_field("hours", -5)
    snap = p.cancel()
    assert not snap.is_open
    assert snap.month == date(2023, 12, 1)
    assert snap.draft == committed
    assert snap.committed == committed
    cb.assert_not_called()


def test_cancel_without_commit_resets_to_now(clock):
    p = DateTimePicker(clock=clock)
    snap = p.open()
    p.select_day(cell_for(snap, date(2024, 3, 3)))
    p.set_time_field("hours", "1")
    clock.now = datetime(2024, 3, 15, 9, 0, 0)
    snap = p.cancel()
    assert snap.draft is None
    assert snap.draft_time == time(9, 0, 0)
    assert snap.committed is None


def test_date_initial_is_midnight():
    p = DateTimePicker(initial=date(2024, 3, 1))
    assert p.committed == datetime(2024, 3, 1, 0, 0, 0)
