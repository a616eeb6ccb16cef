"""
calconv.calendars.iso
---------------------
ISO 8601 week dates. Week 1 of a year is the week (Monday..Sunday) holding
the year's first Thursday, equivalently the week holding 4 January.
"""

from __future__ import annotations

from ..core.errors import DomainError
from ..core.fixed import FixedDate, amod, floor_div, mod_pos
from ..core.types import GregorianDate, IsoDate
from .gregorian import gregorian_to_fixed, gregorian_year_from_fixed


def _monday_on_or_before(fixed: FixedDate) -> FixedDate:
    # Fixed day 1 is a Monday, hence weekday(fixed) == fixed mod 7 with Sunday == 0.
    return fixed - mod_pos(fixed - 1, 7)


def iso_week_one(year: int) -> FixedDate:
    """Fixed date of the Monday starting ISO week 1 of ``year``."""
    return _monday_on_or_before(gregorian_to_fixed(GregorianDate(year, 1, 4)))


def iso_weeks_in_year(year: int) -> int:
    return (iso_week_one(year + 1) - iso_week_one(year)) // 7


def iso_long_year(year: int) -> bool:
    """True for ISO years with 53 weeks."""
    return iso_weeks_in_year(year) == 53


def iso_to_fixed(d: IsoDate) -> FixedDate:
    if d.week > iso_weeks_in_year(d.year):
        raise DomainError(f"ISO year {d.year} has {iso_weeks_in_year(d.year)} weeks, got week {d.week}")
    return iso_week_one(d.year) + 7 * (d.week - 1) + (d.day - 1)


def fixed_to_iso(fixed: FixedDate) -> IsoDate:
    # An ISO year never starts more than 3 days before 1 January.
    approx = gregorian_year_from_fixed(fixed - 3)
    year = approx + 1 if fixed >= iso_week_one(approx + 1) else approx
    week = floor_div(fixed - iso_week_one(year), 7) + 1
    day = amod(fixed, 7)
    return IsoDate(year, week, day)
