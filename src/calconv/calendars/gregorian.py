"""
calconv.calendars.gregorian
---------------------------
Proleptic Gregorian calendar. Fixed day 1 is 1 January of year 1; years
before 1 are numbered astronomically (0, -1, ...).
"""

from __future__ import annotations

from ..core.errors import DomainError
from ..core.fixed import FixedDate, floor_div, mod_pos, search_cycle_boundary
from ..core.types import GregorianDate

GREGORIAN_EPOCH: FixedDate = 1

# Shared with the Julian calendar.
MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DAYS_IN_400_YEARS = 146097
DAYS_IN_100_YEARS = 36524
DAYS_IN_4_YEARS = 1461


def gregorian_leap_year(year: int) -> bool:
    return mod_pos(year, 4) == 0 and mod_pos(year, 400) not in (100, 200, 300)


def last_day_of_gregorian_month(month: int, year: int) -> int:
    if month == 2 and gregorian_leap_year(year):
        return 29
    return MONTH_DAYS[month - 1]


def days_before_gregorian_month(month: int, year: int) -> int:
    """Days in the months preceding ``month`` of ``year``."""
    return sum(last_day_of_gregorian_month(m, year) for m in range(1, month))


def validate_gregorian(d: GregorianDate) -> None:
    last = last_day_of_gregorian_month(d.month, d.year)
    if d.day > last:
        raise DomainError(f"Gregorian {d.year}-{d.month:02d} has {last} days, got day {d.day}")


def gregorian_to_fixed(d: GregorianDate) -> FixedDate:
    validate_gregorian(d)
    prior = d.year - 1
    return (
        d.day
        + days_before_gregorian_month(d.month, d.year)
        + 365 * prior
        + floor_div(prior, 4)
        - floor_div(prior, 100)
        + floor_div(prior, 400)
    )


def gregorian_year_from_fixed(fixed: FixedDate) -> int:
    """Gregorian year containing ``fixed``, via the 400/100/4/1-year cycles."""
    d0 = fixed - GREGORIAN_EPOCH
    n400 = floor_div(d0, DAYS_IN_400_YEARS)
    d1 = mod_pos(d0, DAYS_IN_400_YEARS)
    n100 = floor_div(d1, DAYS_IN_100_YEARS)
    d2 = mod_pos(d1, DAYS_IN_100_YEARS)
    n4 = floor_div(d2, DAYS_IN_4_YEARS)
    d3 = mod_pos(d2, DAYS_IN_4_YEARS)
    n1 = floor_div(d3, 365)
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    # The last day of a leap cycle (n100 == 4 or n1 == 4) still belongs to the ending year.
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def gregorian_new_year(year: int) -> FixedDate:
    return gregorian_to_fixed(GregorianDate(year, 1, 1))


def gregorian_year_end(year: int) -> FixedDate:
    return gregorian_to_fixed(GregorianDate(year, 12, 31))


def fixed_to_gregorian(fixed: FixedDate) -> GregorianDate:
    year = gregorian_year_from_fixed(fixed)
    month = search_cycle_boundary(
        1,
        lambda m: fixed <= gregorian_to_fixed(GregorianDate(year, m, last_day_of_gregorian_month(m, year))),
        hi=12,
    )
    day = fixed - gregorian_to_fixed(GregorianDate(year, month, 1)) + 1
    return GregorianDate(year, month, day)


def gregorian_date_difference(d1: GregorianDate, d2: GregorianDate) -> int:
    """Days from d1 to d2 (negative when d2 is earlier)."""
    return gregorian_to_fixed(d2) - gregorian_to_fixed(d1)


def day_number(d: GregorianDate) -> int:
    """Ordinal day within the Gregorian year (1 January is day 1)."""
    return gregorian_date_difference(GregorianDate(d.year - 1, 12, 31), d)
