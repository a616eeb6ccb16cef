"""
calconv.calendars.islamic
-------------------------
Arithmetic (tabular) Islamic calendar: 30-year cycles of 10631 days with 11
leap years, odd months of 30 days and even months of 29 days, Dhu al-Hijjah
gaining a 30th day in leap years.
"""

from __future__ import annotations

from ..core.errors import DomainError, OutOfRangeError
from ..core.fixed import FixedDate, floor_div, mod_pos, search_cycle_boundary
from ..core.types import IslamicDate

# Julian 622-07-16 (Friday)
ISLAMIC_EPOCH: FixedDate = 227015

DAYS_IN_30_YEARS = 10631
LEAP_YEARS_IN_CYCLE = (2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29)


def islamic_leap_year(year: int) -> bool:
    return mod_pos(14 + 11 * year, 30) < 11


def last_day_of_islamic_month(month: int, year: int) -> int:
    if mod_pos(month, 2) == 1 or (month == 12 and islamic_leap_year(year)):
        return 30
    return 29


def days_in_islamic_year(year: int) -> int:
    return 355 if islamic_leap_year(year) else 354


def islamic_to_fixed(d: IslamicDate) -> FixedDate:
    """Computed proleptically for years before 1 as well."""
    last = last_day_of_islamic_month(d.month, d.year)
    if d.day > last:
        raise DomainError(f"Islamic {d.year}/{d.month} has {last} days, got day {d.day}")
    return (
        d.day
        + 29 * (d.month - 1)
        + floor_div(d.month, 2)
        + 354 * (d.year - 1)
        + floor_div(3 + 11 * d.year, 30)
        + ISLAMIC_EPOCH - 1
    )


def fixed_to_islamic(fixed: FixedDate) -> IslamicDate:
    if fixed < ISLAMIC_EPOCH:
        raise OutOfRangeError(f"Fixed date {fixed} precedes the Islamic epoch {ISLAMIC_EPOCH}")
    # Years are at most 355 days long, so the estimate is never late.
    approx = floor_div(fixed - ISLAMIC_EPOCH, 355) + 1
    year = search_cycle_boundary(
        approx,
        lambda y: fixed < islamic_to_fixed(IslamicDate(y + 1, 1, 1)),
    )
    month = search_cycle_boundary(
        1,
        lambda m: fixed <= islamic_to_fixed(IslamicDate(year, m, last_day_of_islamic_month(m, year))),
        hi=12,
    )
    day = fixed - islamic_to_fixed(IslamicDate(year, month, 1)) + 1
    return IslamicDate(year, month, day)
