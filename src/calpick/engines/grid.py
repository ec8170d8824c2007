"""
calpick.engines.grid
--------------------
Fixed six-week month grid. Every month is laid out Sunday-first in
6 rows x 7 columns, padded with the tail of the previous month and
the head of the next one.
"""

from __future__ import annotations

from datetime import date
from typing import List, Sequence, Tuple

from calpick.core.errors import GridRangeError
from calpick.core.time import (
    FIRST_GRID_MONTH,
    LAST_GRID_MONTH,
    days_in_month,
    first_weekday,
    month_start,
    shift_month,
)
from calpick.core.types import DayCell

GRID_ROWS = 6
GRID_COLS = 7
GRID_CELLS = GRID_ROWS * GRID_COLS


def build_month_grid(focused: date) -> Tuple[DayCell, ...]:
    """
    Return the 42 day cells shown for the month containing ``focused``.

    Only the year and month of ``focused`` are used; its day is ignored.
    Raises GridRangeError for January 0001 and December 9999, whose
    padding days fall outside the representable date range.
    """
    if not FIRST_GRID_MONTH <= month_start(focused) <= LAST_GRID_MONTH:
        raise GridRangeError(
            f"No grid for {focused.year:04d}-{focused.month:02d}. "
            "Buildable months: 0001-02 .. 9999-11"
        )
    year, month = focused.year, focused.month
    lead = first_weekday(focused)

    py, pm = shift_month(year, month, -1)
    prev_len = days_in_month(py, pm)

    cells: List[DayCell] = []
    for d in range(prev_len - lead + 1, prev_len + 1):
        cells.append(DayCell(date(py, pm, d), False))

    for d in range(1, days_in_month(year, month) + 1):
        cells.append(DayCell(date(year, month, d), True))

    ny, nm = shift_month(year, month, 1)
    d = 1
    while len(cells) < GRID_CELLS:
        cells.append(DayCell(date(ny, nm, d), False))
        d += 1

    return tuple(cells)


def weeks(cells: Sequence[DayCell]) -> List[Tuple[DayCell, ...]]:
    """Split a flat grid into rows of seven cells."""
    return [tuple(cells[i:i + GRID_COLS]) for i in range(0, len(cells), GRID_COLS)]


def in_month_count(cells: Sequence[DayCell]) -> int:
    return sum(1 for c in cells if c.in_month)
