from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date, datetime, time


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}, expected YYYY-MM-DD") from None


def _parse_hms(s: str) -> time:
    try:
        h, m, sec = map(int, s.split(":"))
        return time(h, m, sec)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid time {s!r}, expected HH:MM:SS") from None


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_format(argv: list[str]) -> int:
    import calpick

    p = argparse.ArgumentParser(prog="calpick format", description="Render a date, date-time or range as picker display text")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--time", type=_parse_hms, help="HH:MM:SS (renders a date-time)")
    p.add_argument("--end", type=_parse_ymd, help="YYYY-MM-DD (renders a range)")
    args = p.parse_args(argv)

    if args.time is not None and args.end is not None:
        p.error("--time and --end are mutually exclusive")

    d = args.date
    if args.end is not None:
        end = args.end
        if end < d:
            p.error("--end precedes the start date")
        value = calpick.DateRange(d, end)
    elif args.time is not None:
        value = datetime.combine(d, args.time)
    else:
        value = d

    print(calpick.format_value(value))
    return 0


def cmd_presets(argv: list[str]) -> int:
    import calpick

    p = argparse.ArgumentParser(prog="calpick presets", description="Evaluate every quick-select range preset")
    p.add_argument("--today", type=_parse_ymd, help="YYYY-MM-DD to evaluate against (default: the system clock)")
    args = p.parse_args(argv)

    clock = calpick.FixedClock(datetime.combine(args.today, time())) if args.today is not None else datetime.now

    for preset in calpick.list_presets():
        rng = calpick.preset_range(preset.id, clock=clock)
        text = calpick.format_value(rng) if rng is not None else "(manual selection)"
        print(f"{preset.id:<12} {preset.label:<14} {text}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calpick YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_format(argv)

    p = argparse.ArgumentParser(prog="calpick", description="Headless date/time picker toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("month", help="Print the 6-week grid for a month")
    sub.add_parser("format", help="Render a date, date-time or range as display text")
    sub.add_parser("presets", help="Evaluate the quick-select range presets")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "month":
        return _run_module_main("calpick.diagnostics.pretty_month", rest)

    if args.cmd == "format":
        return cmd_format(rest)

    if args.cmd == "presets":
        return cmd_presets(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
