"""
calpick.engines.factory
-----------------------
Transforms PickerSpec payloads into live picker objects.
"""

from __future__ import annotations
from typing import Any, Optional

from calpick.core.time import Clock, system_clock
from calpick.core.types import PickerSpec
from calpick.engines.selection import CommitCallback, SelectionState
from calpick.engines.single import DatePicker
from calpick.engines.timeonly import TimePicker
from calpick.engines.datetime_picker import DateTimePicker
from calpick.engines.range_picker import DateRangePicker


def make_picker(
    spec: PickerSpec,
    *,
    initial: Any = None,
    on_commit: Optional[CommitCallback] = None,
    clock: Clock = system_clock,
) -> SelectionState:
    """The universal entry point."""
    common = dict(initial=initial, on_commit=on_commit, clock=clock, placeholder=spec.placeholder)

    if spec.kind == "date":
        return DatePicker(**common)
    if spec.kind == "time":
        return TimePicker(**common)
    if spec.kind == "datetime":
        return DateTimePicker(**common)
    if spec.kind == "range":
        return DateRangePicker(presets=spec.presets, **common)
    raise TypeError(f"Unknown picker kind: {spec.kind!r}")
