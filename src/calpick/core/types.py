from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Literal, Optional, Tuple

from .time import Clock

PickerKind = Literal["date", "time", "datetime", "range"]

@dataclass(frozen=True)
class DayCell:
    date: date
    in_month: bool  # belongs to the focused month

@dataclass(frozen=True)
class DateRange:
    """Inclusive civil date range. ``end`` is None while a selection is in progress."""
    start: date
    end: Optional[date] = None

    def __post_init__(self) -> None:
        if self.end is not None and self.end < self.start:
            raise ValueError(f"Range end {self.end} precedes start {self.start}")

    @property
    def is_complete(self) -> bool:
        return self.end is not None

    def contains(self, d: date) -> bool:
        if self.end is None:
            return False
        return self.start <= d <= self.end

@dataclass(frozen=True)
class Preset:
    id: str
    label: str
    compute: Callable[[Clock], Optional[DateRange]]

    @property
    def is_custom(self) -> bool:
        return self.id == "custom"

@dataclass(frozen=True)
class PickerId:
    kind: PickerKind
    name: str

@dataclass(frozen=True)
class PickerSpec:
    """Pure data payload for constructing a picker."""
    id: PickerId
    placeholder: str
    presets: Tuple[str, ...] = ()  # preset ids offered, range pickers only

    @property
    def kind(self) -> PickerKind:
        return self.id.kind

    def tweak(self, **kwargs) -> "PickerSpec":
        return replace(self, **kwargs)
