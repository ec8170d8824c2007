from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from calpick.core.errors import PickerKindError
from calpick.core.types import DayCell
from calpick.engines.compare import as_date, is_same_day
from calpick.engines.format import format_date
from calpick.engines.selection import CalendarSelection


@dataclass(frozen=True)
class DateSnapshot:
    is_open: bool
    month: date
    cells: Tuple[DayCell, ...]
    draft: Optional[date]
    committed: Optional[date]
    text: str


class DatePicker(CalendarSelection[date]):
    """Single-date picker. Clicking a day commits it and closes."""

    kind = "date"

    def coerce(self, value) -> date:
        if not isinstance(value, date):
            raise PickerKindError(f"DatePicker expects a date, got {type(value).__name__}")
        return as_date(value)

    def _reset_draft(self) -> None:
        self.draft: Optional[date] = self.committed
        self._focus(self.committed)

    def select_day(self, cell: DayCell):
        if self._accepts("select_day") and self._in_focus(cell):
            self.draft = cell.date
            self._commit(cell.date)
        return self.snapshot()

    def is_selected(self, d: date) -> bool:
        return is_same_day(d, self.draft)

    def display_text(self) -> str:
        return format_date(self.committed) if self.committed is not None else self.placeholder

    def snapshot(self) -> DateSnapshot:
        return DateSnapshot(
            is_open=self.is_open,
            month=self.month,
            cells=self.cells(),
            draft=self.draft,
            committed=self.committed,
            text=self.display_text(),
        )
