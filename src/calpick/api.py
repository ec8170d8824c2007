from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, List, Optional, Tuple

from .core.engine import Picker, PickerRegistry
from .core.time import Clock, system_clock
from .core.types import DateRange, DayCell, Preset, PickerSpec
from .engines import compare as _cmp
from .engines import format as _fmt
from .engines.factory import make_picker as _make_picker
from .engines.grid import build_month_grid as _build_month_grid
from .engines.presets import compute_preset, list_presets as _list_presets
from .engines.selection import CommitCallback

_registry: Optional[PickerRegistry] = None

def set_registry(reg: PickerRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> PickerRegistry:
    if _registry is None:
        raise RuntimeError("Picker registry not initialized")
    return _registry

def list_pickers() -> List[str]:
    return _reg().list()

def picker_spec(name: str) -> PickerSpec:
    return _reg().get(name)

def register_picker(name: str, spec: PickerSpec, *, overwrite: bool = False) -> None:
    _reg().register(name, spec, overwrite=overwrite)

def make_picker(
    name: str,
    *,
    initial: Any = None,
    on_commit: Optional[CommitCallback] = None,
    clock: Clock = system_clock,
) -> Picker:
    return _make_picker(_reg().get(name), initial=initial, on_commit=on_commit, clock=clock)

# ============================================================
# Grid / comparison
# ============================================================

def month_grid(year: int, month: int) -> Tuple[DayCell, ...]:
    return _build_month_grid(date(year, month, 1))

def build_month_grid(focused: date) -> Tuple[DayCell, ...]:
    return _build_month_grid(focused)

def is_same_day(a: date, b: date) -> bool:
    return _cmp.is_same_day(a, b)

def is_today(d: date, *, clock: Clock = system_clock) -> bool:
    return _cmp.is_today(d, clock)

def is_within_range(d: date, rng: DateRange) -> bool:
    return _cmp.is_within_range(d, rng)

# ============================================================
# Presets
# ============================================================

def list_presets() -> List[Preset]:
    return _list_presets()

def preset_range(preset_id: str, *, clock: Clock = system_clock) -> Optional[DateRange]:
    return compute_preset(preset_id, clock)

# ============================================================
# Formatting
# ============================================================

def format_value(value: Any) -> str:
    """Display text for any committed picker value."""
    if isinstance(value, DateRange):
        return _fmt.format_date_range(value)
    if isinstance(value, datetime):
        return _fmt.format_datetime(value)
    if isinstance(value, date):
        return _fmt.format_date(value)
    if isinstance(value, time):
        return _fmt.format_time(value)
    raise TypeError(f"Cannot format {type(value).__name__}")
