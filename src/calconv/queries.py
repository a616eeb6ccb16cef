"""
calconv.queries
---------------
Weekday arithmetic on fixed dates and calendar-independent queries.

Fixed day 1 is a Monday, so ``fixed mod 7`` is the weekday with Sunday = 0.
"""

from __future__ import annotations

from .api import convert, to_fixed
from .calendars.gregorian import gregorian_to_fixed, last_day_of_gregorian_month
from .core.errors import DomainError, OutOfRangeError
from .core.fixed import FixedDate, mod_pos
from .core.types import CalendarDate, GregorianDate

__all__ = [
    "SUNDAY", "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY",
    "day_of_week",
    "kday_on_or_before", "kday_on_or_after", "kday_nearest", "kday_before", "kday_after",
    "nth_kday", "nth_kday_in_month",
    "convert", "days_between",
]

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)


def _check_weekday(k: int) -> None:
    if isinstance(k, bool) or not isinstance(k, int) or not (0 <= k <= 6):
        raise DomainError(f"Weekday must be 0 (Sunday) .. 6 (Saturday), got {k!r}")


def day_of_week(fixed: FixedDate) -> int:
    return mod_pos(fixed, 7)


def kday_on_or_before(k: int, fixed: FixedDate) -> FixedDate:
    _check_weekday(k)
    return fixed - day_of_week(fixed - k)


def kday_on_or_after(k: int, fixed: FixedDate) -> FixedDate:
    return kday_on_or_before(k, fixed + 6)


def kday_nearest(k: int, fixed: FixedDate) -> FixedDate:
    return kday_on_or_before(k, fixed + 3)


def kday_before(k: int, fixed: FixedDate) -> FixedDate:
    """Strictly before ``fixed``."""
    return kday_on_or_before(k, fixed - 1)


def kday_after(k: int, fixed: FixedDate) -> FixedDate:
    """Strictly after ``fixed``."""
    return kday_on_or_before(k, fixed + 7)


def nth_kday(n: int, k: int, fixed: FixedDate) -> FixedDate:
    """
    The n-th k-day on or after ``fixed`` for n > 0, or on or before it for
    n < 0 (so ``nth_kday(-1, SUNDAY, f)`` is the last Sunday not after f).
    """
    if n == 0:
        raise DomainError("nth_kday: n must be non-zero")
    if n > 0:
        return 7 * n + kday_before(k, fixed)
    return 7 * n + kday_after(k, fixed)


def nth_kday_in_month(n: int, k: int, month: int, year: int) -> FixedDate:
    """
    The n-th k-day of a Gregorian month; negative n counts back from the
    month's end (-1 is the last). A fifth weekday that the month lacks
    raises OutOfRangeError.
    """
    first = gregorian_to_fixed(GregorianDate(year, month, 1))
    last = first + last_day_of_gregorian_month(month, year) - 1
    fixed = nth_kday(n, k, first if n > 0 else last)
    if not (first <= fixed <= last):
        raise OutOfRangeError(f"{year}-{month:02d} has no weekday {k} number {n}")
    return fixed


def days_between(a: CalendarDate, b: CalendarDate) -> int:
    """Days from ``a`` to ``b``; the records may belong to different calendars."""
    return to_fixed(b) - to_fixed(a)
