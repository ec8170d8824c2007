"""
calpick.engines.selection
-------------------------
Shared state machine behind every picker.

A picker is either closed or open. While open, interaction mutates a
*draft*; the *committed* value changes only on an explicit commit, at
which point the host callback fires. Cancelling or reopening discards
the draft and reseeds it from the committed value.

Interaction on a closed picker is ignored rather than raised: the view
may deliver a stale click after the popup has gone.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from calpick.core.time import (
    FIRST_GRID_MONTH,
    LAST_GRID_MONTH,
    Clock,
    clamp_month,
    month_start,
    shift_month,
    system_clock,
    today,
)
from calpick.core.types import DayCell
from calpick.engines.grid import build_month_grid

logger = logging.getLogger(__name__)

V = TypeVar("V")
CommitCallback = Callable[[Any], None]


class SelectionState(Generic[V]):
    kind: str = ""

    def __init__(
        self,
        *,
        initial: Optional[V] = None,
        on_commit: Optional[CommitCallback] = None,
        clock: Clock = system_clock,
        placeholder: str = "",
    ):
        self.clock = clock
        self.on_commit = on_commit
        self.placeholder = placeholder
        self.committed: Optional[V] = self.coerce(initial) if initial is not None else None
        self.is_open = False
        self._reset_draft()

    def __repr__(self) -> str:
        state = "Open" if self.is_open else "Closed"
        return f"<{type(self).__name__} {state} committed={self.committed!r}>"

    # ---------------------------------------------------------
    # Hooks for the variants
    # ---------------------------------------------------------

    def coerce(self, value: Any) -> V:
        """Validate and normalise a value before it becomes the committed one."""
        raise NotImplementedError

    def _reset_draft(self) -> None:
        raise NotImplementedError

    def display_text(self) -> str:
        raise NotImplementedError

    def snapshot(self) -> Any:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------

    def open(self):
        if not self.is_open:
            self._reset_draft()
            self.is_open = True
            logger.debug("%s opened (committed=%r)", self.kind, self.committed)
        return self.snapshot()

    def close(self):
        if self.is_open:
            self.is_open = False
            logger.debug("%s closed", self.kind)
        return self.snapshot()

    def toggle(self):
        return self.close() if self.is_open else self.open()

    def cancel(self):
        self._reset_draft()
        self.is_open = False
        logger.debug("%s cancelled, draft restored from %r", self.kind, self.committed)
        return self.snapshot()

    def reset(self, value: Optional[V] = None) -> None:
        """Replace the committed value from the host side, without notifying."""
        self.committed = self.coerce(value) if value is not None else None
        self._reset_draft()

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------

    def _accepts(self, op: str) -> bool:
        if not self.is_open:
            logger.debug("%s: ignored %s on closed picker", self.kind, op)
        return self.is_open

    def _commit(self, value: V) -> None:
        self.committed = value
        self.is_open = False
        logger.info("%s committed %r", self.kind, value)
        if self.on_commit is not None:
            self.on_commit(value)


class CalendarSelection(SelectionState[V]):
    """A picker that shows a month grid."""

    month: date

    def _focus(self, d: Optional[date]) -> None:
        self.month = clamp_month(d if d is not None else today(self.clock))

    def navigate_month(self, direction: int):
        if self._accepts("navigate_month"):
            y, m = shift_month(self.month.year, self.month.month, direction)
            lo = (FIRST_GRID_MONTH.year, FIRST_GRID_MONTH.month)
            hi = (LAST_GRID_MONTH.year, LAST_GRID_MONTH.month)
            if lo <= (y, m) <= hi:
                self.month = date(y, m, 1)
            else:
                logger.debug("%s: ignored navigation past %04d-%02d", self.kind, self.month.year, self.month.month)
        return self.snapshot()

    def cells(self) -> Tuple[DayCell, ...]:
        return build_month_grid(self.month)

    def _in_focus(self, cell: DayCell) -> bool:
        ok = cell.in_month and month_start(cell.date) == self.month
        if not ok:
            logger.debug("%s: ignored click on %s outside focused month %s", self.kind, cell.date, self.month)
        return ok
