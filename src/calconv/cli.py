from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import fields
from typing import List, Optional

from .core.errors import CalconvError, DomainError, OutOfRangeError, UnknownCalendarError
from .core.types import DATE_TYPES, CalendarDate, GregorianDate

_DATE_RE = re.compile(r"^(-?\d{1,})-(\d{2})-(\d{2})$")

_RECORDS = {t.calendar: t for t in DATE_TYPES}

_TRUE = {"1", "true", "yes", "leap", "adhika"}
_FALSE = {"0", "false", "no", "regular"}


def _parse_ymd(s: str) -> GregorianDate:
    m = _DATE_RE.match(s)
    if m is None:
        raise DomainError(f"Expected YYYY-MM-DD, got {s!r}")
    y, mo, d = map(int, m.groups())
    return GregorianDate(y, mo, d)


def _parse_field(value: str, name: str):
    if name == "leap_month":
        v = value.lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
        raise DomainError(f"leap_month must be one of {sorted(_TRUE | _FALSE)}, got {value!r}")
    try:
        return int(value)
    except ValueError:
        raise DomainError(f"{name} must be an integer, got {value!r}") from None


def _parse_record(calendar: str, values: List[str]) -> CalendarDate:
    if calendar not in _RECORDS:
        raise UnknownCalendarError(f"Unknown calendar '{calendar}'. Available: {sorted(_RECORDS)}")
    record = _RECORDS[calendar]
    names = [f.name for f in fields(record)]
    if len(values) != len(names):
        raise DomainError(f"{calendar} takes {len(names)} fields ({' '.join(names)}), got {len(values)}")
    return record(*(_parse_field(v, n) for v, n in zip(values, names)))


def _engine(name: str, correlation: Optional[int]):
    import calconv
    from .calendars.specs import ALL_SPECS

    spec = ALL_SPECS.get(name)
    if correlation is not None and spec is not None and spec.params is not None:
        return calconv.get_calendar(name, correlation=correlation)
    return calconv.get_calendar(name)


def _print_conversions(fixed: int, targets: List[str], correlation: Optional[int]) -> None:
    from .formatting import format_date, weekday_name

    print(f"{'fixed':<18} {fixed} ({weekday_name(fixed)})")
    for name in targets:
        try:
            text = format_date(_engine(name, correlation).from_fixed(fixed))
        except OutOfRangeError as e:
            text = f"- ({e})"
        print(f"{name:<18} {text}")


def cmd_convert(args: argparse.Namespace) -> int:
    import calconv

    d = _parse_record(args.calendar, args.fields)
    fixed = _engine(args.calendar, args.correlation).to_fixed(d, anchor=args.anchor)
    _print_conversions(fixed, args.to or calconv.list_calendars(), args.correlation)
    return 0


def cmd_fixed(args: argparse.Namespace) -> int:
    d = _parse_record(args.calendar, args.fields)
    print(_engine(args.calendar, args.correlation).to_fixed(d, anchor=args.anchor))
    return 0


def cmd_from_fixed(args: argparse.Namespace) -> int:
    import calconv

    _print_conversions(args.fixed, args.to or calconv.list_calendars(), args.correlation)
    return 0


def cmd_weekday(args: argparse.Namespace) -> int:
    from .calendars.gregorian import gregorian_to_fixed
    from .formatting import weekday_name

    print(weekday_name(gregorian_to_fixed(_parse_ymd(args.date))))
    return 0


def cmd_holidays(args: argparse.Namespace) -> int:
    from .calendars.gregorian import fixed_to_gregorian
    from .holidays import holidays_in_year

    for name, dates in holidays_in_year(args.year, dst_schedule=args.dst_schedule).items():
        for fixed in dates:
            g = fixed_to_gregorian(fixed)
            print(f"{g.year:04d}-{g.month:02d}-{g.day:02d}  {name}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    import calconv

    for name in calconv.list_calendars():
        info = calconv.calendar_info(name)
        epoch = info.get("epoch")
        print(f"{name:<18} {info.get('kind', '?'):<11} epoch={'-' if epoch is None else epoch}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="calconv", description="Convert dates between calendars via fixed day numbers.")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_conv = sub.add_parser("convert", help="Show a date in other calendars")
    p_conv.add_argument("calendar")
    p_conv.add_argument("fields", nargs="+", help="date fields in record order, e.g. YEAR MONTH DAY")
    p_conv.add_argument("--to", action="append", default=[], help="target calendar (repeatable; default: all)")
    p_conv.add_argument("--anchor", type=int, default=None, help="fixed date near a haab/tzolkin occurrence")
    p_conv.add_argument("--correlation", type=int, default=None, help="Mayan correlation constant")
    p_conv.set_defaults(func=cmd_convert)

    p_fixed = sub.add_parser("fixed", help="Print the fixed date of a calendar date")
    p_fixed.add_argument("calendar")
    p_fixed.add_argument("fields", nargs="+")
    p_fixed.add_argument("--anchor", type=int, default=None)
    p_fixed.add_argument("--correlation", type=int, default=None)
    p_fixed.set_defaults(func=cmd_fixed)

    p_from = sub.add_parser("from-fixed", help="Show a fixed date in every calendar")
    p_from.add_argument("fixed", type=int)
    p_from.add_argument("--to", action="append", default=[])
    p_from.add_argument("--correlation", type=int, default=None)
    p_from.set_defaults(func=cmd_from_fixed)

    p_wd = sub.add_parser("weekday", help="Weekday of a Gregorian date")
    p_wd.add_argument("date", help="YYYY-MM-DD")
    p_wd.set_defaults(func=cmd_weekday)

    p_hol = sub.add_parser("holidays", help="Holidays of a Gregorian year")
    p_hol.add_argument("year", type=int)
    p_hol.add_argument("--dst-schedule", choices=["post2007", "pre2007", "auto"], default="post2007")
    p_hol.set_defaults(func=cmd_holidays)

    p_list = sub.add_parser("list", help="List registered calendars")
    p_list.set_defaults(func=cmd_list)
    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calconv YYYY-MM-DD [--to ...]`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["convert", "gregorian", *_DATE_RE.match(argv[0]).groups(), *argv[1:]]

    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except CalconvError as e:
        print(f"calconv: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
