from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from calpick.core.errors import PickerKindError
from calpick.engines.format import format_time
from calpick.engines.selection import SelectionState
from calpick.engines.timefield import TimeFields

MIDNIGHT = time(0, 0, 0)


@dataclass(frozen=True)
class TimeSnapshot:
    is_open: bool
    draft: time
    committed: Optional[time]
    text: str


class TimePicker(SelectionState[time]):
    """Time-of-day picker. Field edits stay in the draft until ``apply``."""

    kind = "time"

    def coerce(self, value) -> time:
        if isinstance(value, datetime):
            value = value.time()
        if not isinstance(value, time):
            raise PickerKindError(f"TimePicker expects a time, got {type(value).__name__}")
        return value.replace(microsecond=0, tzinfo=None)

    def _reset_draft(self) -> None:
        self.fields = TimeFields(self.committed if self.committed is not None else MIDNIGHT)

    @property
    def draft(self) -> time:
        return self.fields.as_time()

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
        self._commit(self.draft)
        return True

    def display_text(self) -> str:
        return format_time(self.committed) if self.committed is not None else self.placeholder

    def snapshot(self) -> TimeSnapshot:
        return TimeSnapshot(
            is_open=self.is_open,
            draft=self.draft,
            committed=self.committed,
            text=self.display_text(),
        )
