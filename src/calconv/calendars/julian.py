from __future__ import annotations

from ..core.errors import DomainError
from ..core.fixed import FixedDate, floor_div, mod_pos, search_cycle_boundary
from ..core.types import JulianDate
from .gregorian import MONTH_DAYS

# Julian 0001-01-01 is Gregorian 0000-12-30.
JULIAN_EPOCH: FixedDate = -1


def julian_leap_year(year: int) -> bool:
    return mod_pos(year, 4) == 0


def last_day_of_julian_month(month: int, year: int) -> int:
    if month == 2 and julian_leap_year(year):
        return 29
    return MONTH_DAYS[month - 1]


def julian_to_fixed(d: JulianDate) -> FixedDate:
    last = last_day_of_julian_month(d.month, d.year)
    if d.day > last:
        raise DomainError(f"Julian {d.year}-{d.month:02d} has {last} days, got day {d.day}")
    prior = d.year - 1
    before = sum(last_day_of_julian_month(m, d.year) for m in range(1, d.month))
    return d.day + before + 365 * prior + floor_div(prior, 4) + JULIAN_EPOCH - 1


def fixed_to_julian(fixed: FixedDate) -> JulianDate:
    # Mean-year estimate; never late, at most one year early.
    approx = floor_div(4 * (fixed - JULIAN_EPOCH), 1461) + 1
    year = search_cycle_boundary(
        approx,
        lambda y: fixed < julian_to_fixed(JulianDate(y + 1, 1, 1)),
    )
    month = search_cycle_boundary(
        1,
        lambda m: fixed <= julian_to_fixed(JulianDate(year, m, last_day_of_julian_month(m, year))),
        hi=12,
    )
    day = fixed - julian_to_fixed(JulianDate(year, month, 1)) + 1
    return JulianDate(year, month, day)
