"""
calpick.engines.range_picker
----------------------------
Two-endpoint range picker with quick-select presets.

Endpoint clicks follow a two-click cycle: the first click (or any click
after a completed range) starts a new range, the second one closes it.
A second click earlier than the start swaps the two, so ``start <= end``
holds whenever both are set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from calpick.core.errors import PickerKindError, UnknownPresetError
from calpick.core.types import DateRange, DayCell, Preset
from calpick.engines.compare import as_date, is_same_day
from calpick.engines.format import format_range
from calpick.engines.presets import CUSTOM, DEFAULT_PRESET_IDS, get_preset
from calpick.engines.selection import CalendarSelection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeSnapshot:
    is_open: bool
    month: date
    cells: Tuple[DayCell, ...]
    start: Optional[date]
    end: Optional[date]
    active_preset: str
    presets: Tuple[Preset, ...]
    committed: Optional[DateRange]
    text: str


class DateRangePicker(CalendarSelection[DateRange]):
    kind = "range"

    def __init__(self, *, presets: Tuple[str, ...] = DEFAULT_PRESET_IDS, **kwargs):
        self.presets = tuple(get_preset(p) for p in presets)
        self.committed_preset = CUSTOM
        super().__init__(**kwargs)

    def coerce(self, value) -> DateRange:
        if isinstance(value, tuple) and len(value) == 2:
            value = DateRange(as_date(value[0]), as_date(value[1]))
        if not isinstance(value, DateRange):
            raise PickerKindError(f"DateRangePicker expects a DateRange, got {type(value).__name__}")
        if not value.is_complete:
            raise PickerKindError("A committed range needs both start and end")
        return value

    def _reset_draft(self) -> None:
        if self.committed is not None:
            self.start: Optional[date] = self.committed.start
            self.end: Optional[date] = self.committed.end
            self.active_preset = self.committed_preset
        else:
            self.start = None
            self.end = None
            self.active_preset = CUSTOM
        self._focus(self.start)

    def reset(self, value: Optional[DateRange] = None) -> None:
        self.committed_preset = CUSTOM
        super().reset(value)

    @property
    def draft(self) -> Optional[DateRange]:
        if self.start is None:
            return None
        return DateRange(self.start, self.end)

    # ---------------------------------------------------------
    # Interaction
    # ---------------------------------------------------------

    def select_day(self, cell: DayCell):
        if not (self._accepts("select_day") and self._in_focus(cell)):
            return self.snapshot()

        d = cell.date
        if self.start is None or self.end is not None:
            self.start, self.end = d, None
        elif d >= self.start:
            self.end = d
        else:
            self.start, self.end = d, self.start
        return self.snapshot()

    def select_preset(self, preset_id: str):
        preset = self._offered(preset_id)
        if not self._accepts("select_preset"):
            return self.snapshot()

        self.active_preset = preset.id
        if preset.is_custom:
            self.start = self.end = None
            self.committed = None
            self.committed_preset = CUSTOM
            logger.debug("range: custom preset, selection cleared")
            return self.snapshot()

        rng = preset.compute(self.clock)
        self.start, self.end = rng.start, rng.end
        self.committed_preset = preset.id
        self._commit(rng)
        return self.snapshot()

    def apply(self) -> bool:
        if not self._accepts("apply"):
            return False
        if self.start is None or self.end is None:
            logger.debug("range: apply ignored, incomplete range start=%s", self.start)
            return False
        self.active_preset = CUSTOM
        self.committed_preset = CUSTOM
        self._commit(DateRange(self.start, self.end))
        return True

    def _offered(self, preset_id: str) -> Preset:
        for p in self.presets:
            if p.id == preset_id:
                return p
        raise UnknownPresetError(
            f"Preset '{preset_id}' is not offered. Available: {[p.id for p in self.presets]}"
        )

    # ---------------------------------------------------------
    # Highlighting / display
    # ---------------------------------------------------------

    def is_start(self, d: date) -> bool:
        return is_same_day(d, self.start)

    def is_end(self, d: date) -> bool:
        return is_same_day(d, self.end)

    def is_selected(self, d: date) -> bool:
        if self.start is None:
            return False
        if self.end is None:
            return is_same_day(d, self.start)
        return self.start <= as_date(d) <= self.end

    def display_text(self) -> str:
        if self.committed is not None:
            return format_range(self.committed.start, self.committed.end)
        if self.start is not None:
            return format_range(self.start, self.end)
        return self.placeholder

    def snapshot(self) -> RangeSnapshot:
        return RangeSnapshot(
            is_open=self.is_open,
            month=self.month,
            cells=self.cells(),
            start=self.start,
            end=self.end,
            active_preset=self.active_preset,
            presets=self.presets,
            committed=self.committed,
            text=self.display_text(),
        )
