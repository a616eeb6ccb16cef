"""
calconv.calendars.hebrew
------------------------
Arithmetic Hebrew calendar.

Time is counted in days and parts (halakim): 1 hour = 1080 parts,
1 day = 25920 parts, and the Hebrew day starts at 6 pm. The molad (mean
conjunction) of Tishri of year 1 fell on day 1 (a Monday) at 5h 204p
("BaHaRaD") counted from the Sunday preceding the epoch; every later molad
is that instant plus a whole number of mean lunations of 29d 12h 793p.

Rosh Hashanah (1 Tishri) is the day of the molad of Tishri unless one of the
postponement rules (dehiyyot) moves it:

  * molad zaken: molad at or after noon (18h)          -> next day
  * GaTaRaD: common year, molad on Tuesday >= 9h 204p  -> next day
  * BeTUTaKPaT: year after a leap year, molad on
    Monday >= 15h 589p                                 -> next day
  * lo ADU Rosh: the resulting day is Sunday, Wednesday or Friday -> next day

The first three never combine with each other; the last may stack on any of
them, giving delays of 0, 1 or 2 days. The combined outcome fixes the year
length (353-355 or 383-385 days) and with it the lengths of Heshvan and
Kislev.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Literal, Tuple

from ..core.errors import DomainError
from ..core.fixed import FixedDate, floor_div, mod_pos, search_cycle_boundary
from ..core.types import HebrewDate

# Julian -3760-10-07 (Monday, 7 October 3761 BCE)
HEBREW_EPOCH: FixedDate = -1373427

NISAN, IYYAR, SIVAN, TAMMUZ, AV, ELUL = 1, 2, 3, 4, 5, 6
TISHRI, HESHVAN, KISLEV, TEVETH, SHEVAT, ADAR, ADAR_II = 7, 8, 9, 10, 11, 12, 13

PARTS_PER_HOUR = 1080
PARTS_PER_DAY = 24 * PARTS_PER_HOUR

# 29d 12h 793p
LUNATION_PARTS = 29 * PARTS_PER_DAY + 12 * PARTS_PER_HOUR + 793
MEAN_LUNATION = Fraction(LUNATION_PARTS, PARTS_PER_DAY)
# Day 1, 5h 204p
MOLAD_OF_YEAR_ONE_PARTS = 1 * PARTS_PER_DAY + 5 * PARTS_PER_HOUR + 204
# 235 lunations per 19 years
MEAN_YEAR = Fraction(235, 19) * MEAN_LUNATION

MONTHS_IN_CYCLE = 235
LEAP_YEARS_IN_CYCLE = (3, 6, 8, 11, 14, 17, 19)

MOLAD_ZAKEN_PARTS = 18 * PARTS_PER_HOUR                 # noon
GATARAD_PARTS = 9 * PARTS_PER_HOUR + 204
BETUTAKPAT_PARTS = 15 * PARTS_PER_HOUR + 589
ADU_WEEKDAYS = (0, 3, 5)                               # Sunday, Wednesday, Friday

YearType = Literal["deficient", "regular", "complete"]


@dataclass(frozen=True)
class Molad:
    """
    Molad of Tishri. ``day`` counts from the Sunday before the epoch (so
    ``day % 7`` is the weekday with Sunday = 0) and ``parts`` counts from
    6 pm at the start of that day.
    """
    months_elapsed: int
    day: int
    parts: int

    @property
    def weekday(self) -> int:
        return mod_pos(self.day, 7)

    @property
    def hours(self) -> int:
        return self.parts // PARTS_PER_HOUR

    @property
    def halakim(self) -> int:
        return self.parts % PARTS_PER_HOUR


@dataclass(frozen=True)
class Dehiyyot:
    """Which postponement rules moved Rosh Hashanah, and by how many days."""
    molad_zaken: bool
    gatarad: bool
    betutakpat: bool
    lo_adu_rosh: bool

    @property
    def delay(self) -> int:
        return int(self.molad_zaken or self.gatarad or self.betutakpat) + int(self.lo_adu_rosh)


def hebrew_leap_year(year: int) -> bool:
    return mod_pos(7 * year + 1, 19) < 7


def last_month_of_hebrew_year(year: int) -> int:
    return ADAR_II if hebrew_leap_year(year) else ADAR


def hebrew_months_elapsed(year: int) -> int:
    """Lunations from the epoch molad to the molad of Tishri of ``year``."""
    prior = year - 1
    cycle_year = mod_pos(prior, 19)
    return (
        MONTHS_IN_CYCLE * floor_div(prior, 19)
        + 12 * cycle_year
        + floor_div(7 * cycle_year + 1, 19)
    )


def hebrew_molad(year: int) -> Molad:
    months = hebrew_months_elapsed(year)
    total = MOLAD_OF_YEAR_ONE_PARTS + months * LUNATION_PARTS
    return Molad(months_elapsed=months, day=floor_div(total, PARTS_PER_DAY), parts=mod_pos(total, PARTS_PER_DAY))


def hebrew_molad_moment(year: int) -> Fraction:
    """The molad of Tishri as an exact day count on the same axis as ``Molad.day``."""
    return Fraction(MOLAD_OF_YEAR_ONE_PARTS, PARTS_PER_DAY) + hebrew_months_elapsed(year) * MEAN_LUNATION


def hebrew_new_year_delay(year: int) -> Dehiyyot:
    m = hebrew_molad(year)
    zaken = m.parts >= MOLAD_ZAKEN_PARTS
    gatarad = (not zaken) and m.weekday == 2 and m.parts >= GATARAD_PARTS and not hebrew_leap_year(year)
    betutakpat = (
        (not zaken) and (not gatarad)
        and m.weekday == 1 and m.parts >= BETUTAKPAT_PARTS and hebrew_leap_year(year - 1)
    )
    day = m.day + int(zaken or gatarad or betutakpat)
    return Dehiyyot(
        molad_zaken=zaken,
        gatarad=gatarad,
        betutakpat=betutakpat,
        lo_adu_rosh=mod_pos(day, 7) in ADU_WEEKDAYS,
    )


def hebrew_calendar_elapsed_days(year: int) -> int:
    """Days from the Sunday before the epoch to Rosh Hashanah of ``year`` (epoch day is 1)."""
    return hebrew_molad(year).day + hebrew_new_year_delay(year).delay


def hebrew_new_year(year: int) -> FixedDate:
    """Fixed date of 1 Tishri of ``year``."""
    return HEBREW_EPOCH + hebrew_calendar_elapsed_days(year) - 1


def days_in_hebrew_year(year: int) -> int:
    return hebrew_calendar_elapsed_days(year + 1) - hebrew_calendar_elapsed_days(year)


def hebrew_year_type(year: int) -> YearType:
    return {3: "deficient", 4: "regular", 5: "complete"}[mod_pos(days_in_hebrew_year(year), 10)]


def long_heshvan(year: int) -> bool:
    return mod_pos(days_in_hebrew_year(year), 10) == 5


def short_kislev(year: int) -> bool:
    return mod_pos(days_in_hebrew_year(year), 10) == 3


def _month_lengths(year: int) -> Dict[int, int]:
    """Length of every month of ``year``, keyed by month number."""
    leap = hebrew_leap_year(year)
    length = days_in_hebrew_year(year) % 10
    out = {
        NISAN: 30, IYYAR: 29, SIVAN: 30, TAMMUZ: 29, AV: 30, ELUL: 29,
        TISHRI: 30,
        HESHVAN: 30 if length == 5 else 29,
        KISLEV: 29 if length == 3 else 30,
        TEVETH: 29, SHEVAT: 30,
        ADAR: 30 if leap else 29,
    }
    if leap:
        out[ADAR_II] = 29
    return out


def last_day_of_hebrew_month(month: int, year: int) -> int:
    lengths = _month_lengths(year)
    if month not in lengths:
        raise DomainError(f"Hebrew year {year} has no month {month}")
    return lengths[month]


def _months_in_order(year: int):
    return list(range(TISHRI, last_month_of_hebrew_year(year) + 1)) + list(range(NISAN, TISHRI))


def hebrew_sort_key(d: HebrewDate) -> Tuple[int, int, int]:
    """Chronological key; months count from Tishri, so Adar II follows Adar and Nisan follows both."""
    return (d.year, mod_pos(d.month - TISHRI, 13), d.day)


def hebrew_precedes(d1: HebrewDate, d2: HebrewDate) -> bool:
    return hebrew_sort_key(d1) < hebrew_sort_key(d2)


def hebrew_to_fixed(d: HebrewDate) -> FixedDate:
    lengths = _month_lengths(d.year)
    if d.month not in lengths:
        raise DomainError(f"Hebrew year {d.year} is not a leap year and has no month {d.month}")
    if d.day > lengths[d.month]:
        raise DomainError(f"Hebrew month {d.month} of {d.year} has {lengths[d.month]} days, got day {d.day}")
    order = _months_in_order(d.year)
    before = sum(lengths[m] for m in order[: order.index(d.month)])
    return hebrew_new_year(d.year) + before + d.day - 1


def fixed_to_hebrew(fixed: FixedDate) -> HebrewDate:
    # Rosh Hashanah drifts less than a year from the mean, so this is never late.
    approx = floor_div(fixed - HEBREW_EPOCH, MEAN_YEAR)
    year = search_cycle_boundary(approx, lambda y: fixed < hebrew_new_year(y + 1))

    lengths = _month_lengths(year)
    start = hebrew_new_year(year)
    for month in _months_in_order(year):
        if fixed < start + lengths[month]:
            return HebrewDate(year, month, fixed - start + 1)
        start += lengths[month]
    raise RuntimeError("unreachable")
