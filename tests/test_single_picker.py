# tests/test_single_picker.py

from datetime import date, datetime, time
from unittest.mock import Mock

import pytest

from calpick.core.errors import PickerKindError
from calpick.engines.single import DatePicker

from conftest import cell_for


def test_open_seeds_from_today(clock):
    p = DatePicker(clock=clock, placeholder="Select Date")
    snap = p.open()
    assert snap.is_open
    assert snap.month == date(2024, 3, 1)
    assert snap.draft is None
    assert snap.text == "Select Date"


def test_open_seeds_from_committed(clock):
    p = DatePicker(initial=date(2021, 7, 4), clock=clock)
    snap = p.open()
    assert snap.month == date(2021, 7, 1)
    assert snap.draft == date(2021, 7, 4)
    assert p.is_selected(date(2021, 7, 4))
    assert snap.text == "04-Jul-2021"


def test_select_day_commits_and_closes(clock):
    cb = Mock()
    p = DatePicker(clock=clock, on_commit=cb)
    snap = p.open()
    snap = p.select_day(cell_for(snap, date(2024, 3, 20)))
    assert not snap.is_open
    assert snap.committed == date(2024, 3, 20)
    assert snap.text == "20-Mar-2024"
    cb.assert_called_once_with(date(2024, 3, 20))


def test_click_outside_focused_month_is_ignored(clock):
    cb = Mock()
    p = DatePicker(clock=clock, on_commit=cb)
    snap = p.open()
    leading = snap.cells[0]
    assert not leading.in_month
    snap = p.select_day(leading)
    assert snap.is_open
    assert snap.committed is None
    cb.assert_not_called()


def test_stale_cell_from_another_month_is_ignored(clock):
    p = DatePicker(clock=clock)
    march = p.open()
    p.navigate_month(1)
    snap = p.select_day(cell_for(march, date(2024, 3, 20)))
    assert snap.committed is None
    assert snap.is_open


def test_navigation_changes_month_only(clock):
    p = DatePicker(initial=date(2023, 12, 31), clock=clock)
    p.open()
    snap = p.navigate_month(1)
    assert snap.month == date(2024, 1, 1)
    assert snap.draft == date(2023, 12, 31)
    assert snap.committed == date(2023, 12, 31)
    snap = p.navigate_month(-1)
    snap = p.navigate_month(-1)
    assert snap.month == date(2023, 11, 1)


def test_closed_picker_ignores_interaction(clock):
    cb = Mock()
    p = DatePicker(clock=clock, on_commit=cb)
    snap = p.select_day(cell_for(p.snapshot(), date(2024, 3, 20)))
    assert snap.committed is None
    assert p.navigate_month(1).month == date(2024, 3, 1)
    cb.assert_not_called()


def test_close_and_toggle(clock):
    p = DatePicker(clock=clock)
    assert p.toggle().is_open
    assert not p.toggle().is_open
    p.open()
    assert not p.close().is_open


def test_reopen_discards_navigation(clock):
    p = DatePicker(initial=date(2024, 1, 5), clock=clock)
    p.open()
    p.navigate_month(5)
    p.close()
    assert p.open().month == date(2024, 1, 1)


def test_initial_value_type():
    assert DatePicker(initial=datetime(2024, 3, 1, 12)).committed == date(2024, 3, 1)
    with pytest.raises(PickerKindError):
        DatePicker(initial=time(12, 0))
    with pytest.raises(TypeError):
        DatePicker(initial="2024-03-01")


def test_host_reset_does_not_notify(clock):
    cb = Mock()
    p = DatePicker(initial=date(2024, 3, 1), clock=clock, on_commit=cb)
    p.reset(date(2022, 5, 6))
    assert p.committed == date(2022, 5, 6)
    assert p.open().month == date(2022, 5, 1)
    p.reset()
    assert p.committed is None
    cb.assert_not_called()


def test_navigation_stops_at_last_buildable_month(clock):
    p = DatePicker(initial=date(9999, 11, 5), clock=clock)
    p.open()
    snap = p.navigate_month(1)
    assert snap.is_open
    assert snap.month == date(9999, 11, 1)
    assert len(snap.cells) == 42


def test_navigation_stops_at_first_buildable_month(clock):
    p = DatePicker(initial=date(1, 2, 10), clock=clock)
    p.open()
    snap = p.navigate_month(-1)
    assert snap.month == date(1, 2, 1)
    assert p.navigate_month(-12).month == date(1, 2, 1)


def test_focus_on_unbuildable_month_is_clamped(clock):
    p = DatePicker(initial=date(9999, 12, 31), clock=clock)
    snap = p.open()
    assert snap.month == date(9999, 11, 1)
    assert snap.committed == date(9999, 12, 31)
    p = DatePicker(initial=date(1, 1, 1), clock=clock)
    assert p.open().month == date(1, 2, 1)
