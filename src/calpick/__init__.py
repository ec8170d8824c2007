"""calpick public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_pickers,
    picker_spec,
    register_picker,
    make_picker,
    month_grid,
    build_month_grid,
    is_same_day,
    is_today,
    is_within_range,
    list_presets,
    preset_range,
    format_value,
)
from .core.time import FixedClock
from .core.types import DateRange, DayCell, Preset, PickerId, PickerSpec
from .engines.compare import Ordering, compare
from .engines.format import (
    format_date,
    format_time,
    format_datetime,
    format_range,
    format_month_label,
    parse_date,
    parse_time,
    parse_datetime,
    parse_range,
    WEEKDAY_LABELS,
)

__all__ = [
    "list_pickers",
    "picker_spec",
    "register_picker",
    "make_picker",
    "month_grid",
    "build_month_grid",
    "is_same_day",
    "is_today",
    "is_within_range",
    "compare",
    "Ordering",
    "list_presets",
    "preset_range",
    "format_value",
    "format_date",
    "format_time",
    "format_datetime",
    "format_range",
    "format_month_label",
    "parse_date",
    "parse_time",
    "parse_datetime",
    "parse_range",
    "WEEKDAY_LABELS",
    "FixedClock",
    "DateRange",
    "DayCell",
    "Preset",
    "PickerId",
    "PickerSpec",
]
