"""
calpick.engines.presets
-----------------------
Quick-select ranges. Each preset reads the clock when it is computed,
never at import or registration time.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Dict, List, Optional

from calpick.core.errors import UnknownPresetError
from calpick.core.time import Clock, add_months, system_clock, today
from calpick.core.types import DateRange, Preset

CUSTOM = "custom"


def _today(clock: Clock) -> DateRange:
    now = today(clock)
    return DateRange(now, now)


def _yesterday(clock: Clock) -> DateRange:
    d = today(clock) - timedelta(days=1)
    return DateRange(d, d)


def _last_week(clock: Clock) -> DateRange:
    now = today(clock)
    return DateRange(now - timedelta(days=7), now)


def _last_month(clock: Clock) -> DateRange:
    # Mar 31 - 1 month rolls over to Mar 3 (Mar 2 in leap years)
    now = today(clock)
    return DateRange(add_months(now, -1), now)


def _last_30_days(clock: Clock) -> DateRange:
    now = today(clock)
    return DateRange(now - timedelta(days=30), now)


def _custom(clock: Clock) -> Optional[DateRange]:
    return None


PRESETS: Dict[str, Preset] = {
    p.id: p
    for p in (
        Preset("today", "Today", _today),
        Preset("yesterday", "Yesterday", _yesterday),
        Preset("lastWeek", "Last week", _last_week),
        Preset("lastMonth", "Last month", _last_month),
        Preset("last30Days", "Last 30 days", _last_30_days),
        Preset(CUSTOM, "Custom", _custom),
    )
}

DEFAULT_PRESET_IDS = tuple(PRESETS)


def get_preset(preset_id: str) -> Preset:
    if preset_id not in PRESETS:
        raise UnknownPresetError(f"Unknown preset '{preset_id}'. Available: {list(PRESETS)}")
    return PRESETS[preset_id]


def list_presets() -> List[Preset]:
    return list(PRESETS.values())


def compute_preset(preset_id: str, clock: Clock = system_clock) -> Optional[DateRange]:
    return get_preset(preset_id).compute(clock)
