from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Tuple

from calpick.core.errors import PickerKindError
from calpick.core.types import DayCell
from calpick.engines.compare import is_same_day
from calpick.engines.format import format_datetime
from calpick.engines.selection import CalendarSelection
from calpick.engines.timefield import TimeFields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateTimeSnapshot:
    is_open: bool
    month: date
    cells: Tuple[DayCell, ...]
    draft_date: Optional[date]
    draft_time: time
    committed: Optional[datetime]
    text: str

    @property
    def draft(self) -> Optional[datetime]:
        if self.draft_date is None:
            return None
        return datetime.combine(self.draft_date, self.draft_time)


class DateTimePicker(CalendarSelection[datetime]):
    """
    Combined date and time-of-day picker.

    Day clicks and field edits only touch the draft; nothing is reported
    to the host until ``apply``. With nothing committed the draft time
    starts from the clock.
    """

    kind = "datetime"

    def coerce(self, value) -> datetime:
        if isinstance(value, datetime):
            return value.replace(microsecond=0, tzinfo=None)
        if isinstance(value, date):
            return datetime.combine(value, time(0, 0, 0))
        raise PickerKindError(f"DateTimePicker expects a datetime, got {type(value).__name__}")

    def _reset_draft(self) -> None:
        if self.committed is not None:
            self.draft_date: Optional[date] = self.committed.date()
            self.fields = TimeFields(self.committed.time())
            self._focus(self.committed)
        else:
            now = self.clock()
            self.draft_date = None
            self.fields = TimeFields(now.time())
            self._focus(now)

    @property
    def draft(self) -> Optional[datetime]:
        if self.draft_date is None:
            return None
        return datetime.combine(self.draft_date, self.fields.as_time())

    def select_day(self, cell: DayCell):
        if self._accepts("select_day") and self._in_focus(cell):
            self.draft_date = cell.date
        return self.snapshot()

    def adjust_time_field(self, kind: str, delta: int):
        field = self.fields.field(kind)
        if self._accepts("adjust_time_field"):
            field.adjust(delta)
        return self.snapshot()

    def set_time_field(self, kind: str, raw: object):
        field = self.fields.field(kind)
        if self._accepts("set_time_field"):
            field.set_from_input(raw)
        return self.snapshot()

    def apply(self) -> bool:
        if not self._accepts("apply"):
            return False
        value = self.draft
        if value is None:
            logger.debug("datetime: apply ignored, no day selected")
            return False
        self._commit(value)
        return True

    def is_selected(self, d: date) -> bool:
        return is_same_day(d, self.draft_date)

    def display_text(self) -> str:
        return format_datetime(self.committed) if self.committed is not None else self.placeholder

    def snapshot(self) -> DateTimeSnapshot:
        return DateTimeSnapshot(
            is_open=self.is_open,
            month=self.month,
            cells=self.cells(),
            draft_date=self.draft_date,
            draft_time=self.fields.as_time(),
            committed=self.committed,
            text=self.display_text(),
        )
