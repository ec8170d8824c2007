from __future__ import annotations

from datetime import date
import argparse

import calpick
from calpick.engines.grid import weeks


def dow_header(w: int = 4) -> str:
    return " ".join(lbl.ljust(w) for lbl in calpick.WEEKDAY_LABELS).rstrip()


def cell(c: calpick.DayCell, today: date, w: int = 4) -> str:
    # out-of-month days in parentheses, today marked with '*'
    label = f"{c.date.day:2d}" if c.in_month else f"({c.date.day})"
    if c.date == today:
        label += "*"
    return label.ljust(w)


def render_month(year: int, month: int, *, today: date | None = None) -> str:
    today = today or date.today()
    cells = calpick.month_grid(year, month)
    header = dow_header()
    lines = [calpick.format_month_label(date(year, month, 1)), header, "-" * len(header)]
    for wk in weeks(cells):
        lines.append(" ".join(cell(c, today) for c in wk).rstrip())
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="calpick month",
        description="Print the fixed 6-week picker grid for a Gregorian month.",
    )
    p.add_argument("year", type=int, nargs="?", help="e.g. 2024 (default: current year)")
    p.add_argument("month", type=int, nargs="?", help="1-12 (default: current month)")
    args = p.parse_args(argv)

    today = date.today()
    year = args.year if args.year is not None else today.year
    month = args.month if args.month is not None else today.month
    if not 1 <= month <= 12:
        p.error("month must be in 1..12")

    print(render_month(year, month, today=today))
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
