"""
calconv.calendars.french
------------------------
Arithmetic French Revolutionary calendar: twelve months of 30 days followed
by five or six sansculottides (month 13). Leap years are the ones actually
observed by the Republic (3, 7, 11, 15) and year 20, then Romme's rule.
Dates before the epoch are not part of the calendar.
"""

from __future__ import annotations

from ..core.errors import DomainError, OutOfRangeError
from ..core.fixed import FixedDate, floor_div, mod_pos, search_cycle_boundary
from ..core.types import FrenchDate

# Gregorian 1792-09-22, 1 Vendemiaire I
FRENCH_EPOCH: FixedDate = 654415

HISTORICAL_LEAP_YEARS = (3, 7, 11, 15, 20)
SANSCULOTTIDES = 13


def french_leap_year(year: int) -> bool:
    if year <= 20:
        return year in HISTORICAL_LEAP_YEARS
    return (
        mod_pos(year, 4) == 0
        and mod_pos(year, 400) not in (100, 200, 300)
        and mod_pos(year, 4000) != 0
    )


def last_day_of_french_month(month: int, year: int) -> int:
    if month < SANSCULOTTIDES:
        return 30
    return 6 if french_leap_year(year) else 5


def _leap_days_before(year: int) -> int:
    """Leap days in the years before ``year``."""
    if year < 20:
        return floor_div(year, 4)
    prior = year - 1
    return floor_div(prior, 4) - floor_div(prior, 100) + floor_div(prior, 400) - floor_div(prior, 4000)


def french_to_fixed(d: FrenchDate) -> FixedDate:
    last = last_day_of_french_month(d.month, d.year)
    if d.day > last:
        raise DomainError(f"French year {d.year} month {d.month} has {last} days, got day {d.day}")
    return FRENCH_EPOCH - 1 + 365 * (d.year - 1) + _leap_days_before(d.year) + 30 * (d.month - 1) + d.day


def fixed_to_french(fixed: FixedDate) -> FrenchDate:
    if fixed < FRENCH_EPOCH:
        raise OutOfRangeError(f"Fixed date {fixed} precedes the French Revolutionary epoch {FRENCH_EPOCH}")
    approx = floor_div(fixed - FRENCH_EPOCH, 366) + 1
    year = search_cycle_boundary(
        approx,
        lambda y: fixed < french_to_fixed(FrenchDate(y + 1, 1, 1)),
    )
    month = floor_div(fixed - french_to_fixed(FrenchDate(year, 1, 1)), 30) + 1
    day = fixed - french_to_fixed(FrenchDate(year, month, 1)) + 1
    return FrenchDate(year, month, day)
