"""
calpick.engines.timefield
-------------------------
Bounded hour/minute/second spinners.

Values clamp at the bounds: stepping past 23 hours stays at 23, stepping
below 0 stays at 0. There is no wraparound and no carry into the
neighbouring field.
"""

from __future__ import annotations

import math
import re
from datetime import time
from typing import Dict, Literal, Tuple

from calpick.core.errors import UnknownFieldError

FieldKind = Literal["hours", "minutes", "seconds"]

FIELD_MAX: Dict[str, int] = {"hours": 23, "minutes": 59, "seconds": 59}
FIELD_KINDS: Tuple[str, ...] = ("hours", "minutes", "seconds")

# leading integer, the rest of the text is ignored ("12abc" -> 12)
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_int_prefix(raw: object) -> int:
    """Read a leading integer from arbitrary input. Anything unreadable is 0."""
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0
    m = _INT_PREFIX.match(str(raw))
    return int(m.group(1)) if m else 0


def _check_kind(kind: str) -> str:
    if kind not in FIELD_MAX:
        raise UnknownFieldError(f"Unknown time field '{kind}'. Available: {list(FIELD_KINDS)}")
    return kind


class TimeField:
    def __init__(self, kind: FieldKind, value: int = 0):
        self.kind = _check_kind(kind)
        self.maximum = FIELD_MAX[kind]
        self.value = self.clamp(value)

    def __repr__(self) -> str:
        return f"TimeField({self.kind!r}, {self.value})"

    def clamp(self, value: int) -> int:
        return max(0, min(self.maximum, value))

    def set(self, value: int) -> int:
        self.value = self.clamp(value)
        return self.value

    def increment(self) -> int:
        return self.set(self.value + 1)

    def decrement(self) -> int:
        return self.set(self.value - 1)

    def adjust(self, delta: int) -> int:
        return self.set(self.value + delta)

    def set_from_input(self, raw: object) -> int:
        return self.set(parse_int_prefix(raw))


class TimeFields:
    """The hours/minutes/seconds triple edited by the time-bearing pickers."""

    def __init__(self, t: time = time(0, 0, 0)):
        self.hours = TimeField("hours", t.hour)
        self.minutes = TimeField("minutes", t.minute)
        self.seconds = TimeField("seconds", t.second)

    def field(self, kind: str) -> TimeField:
        return getattr(self, _check_kind(kind))

    def adjust(self, kind: str, delta: int) -> int:
        return self.field(kind).adjust(delta)

    def set_from_input(self, kind: str, raw: object) -> int:
        return self.field(kind).set_from_input(raw)

    def load(self, t: time) -> None:
        self.hours.set(t.hour)
        self.minutes.set(t.minute)
        self.seconds.set(t.second)

    def as_time(self) -> time:
        return time(self.hours.value, self.minutes.value, self.seconds.value)
