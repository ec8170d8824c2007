from datetime import date, datetime

import pytest

from calpick.core.time import FixedClock


@pytest.fixture
def clock():
    """Wall clock frozen at Friday 15 March 2024, 08:30:45."""
    return FixedClock(datetime(2024, 3, 15, 8, 30, 45))


def cell_for(snap, d: date):
    """Grid cell of ``d`` in a picker snapshot."""
    return next(c for c in snap.cells if c.date == d)
