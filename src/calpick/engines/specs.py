from __future__ import annotations

from typing import Dict

from ..core.types import PickerId, PickerSpec
from .presets import DEFAULT_PRESET_IDS

# ============================================================
# BUILT-IN PICKERS
# ============================================================

DATE_SPEC = PickerSpec(
    id=PickerId(kind="date", name="date"),
    placeholder="Select Date",
)

TIME_SPEC = PickerSpec(
    id=PickerId(kind="time", name="time"),
    placeholder="Select Time",
)

DATETIME_SPEC = PickerSpec(
    id=PickerId(kind="datetime", name="datetime"),
    placeholder="Select Date & Time",
)

RANGE_SPEC = PickerSpec(
    id=PickerId(kind="range", name="range"),
    placeholder="Select Date Range",
    presets=DEFAULT_PRESET_IDS,
)

ALL_SPECS: Dict[str, PickerSpec] = {
    s.id.name: s for s in (DATE_SPEC, TIME_SPEC, DATETIME_SPEC, RANGE_SPEC)
}
