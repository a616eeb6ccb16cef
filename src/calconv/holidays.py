"""
calconv.holidays
----------------
Secular, Christian, Islamic and Jewish holidays of a Gregorian year, as
fixed dates.

Holidays that follow a calendar whose year is not aligned with the
Gregorian one can occur zero, one or two times in a Gregorian year; those
functions return a list.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Literal

from .calendars.gregorian import gregorian_new_year, gregorian_to_fixed, gregorian_year_end
from .calendars.hebrew import (
    ADAR,
    AV,
    HESHVAN,
    KISLEV,
    NISAN,
    SHEVAT,
    TEVETH,
    TISHRI,
    ADAR_II,
    hebrew_leap_year,
    hebrew_to_fixed,
    last_month_of_hebrew_year,
    long_heshvan,
    short_kislev,
)
from .calendars.islamic import ISLAMIC_EPOCH, fixed_to_islamic, islamic_to_fixed, last_day_of_islamic_month
from .calendars.julian import fixed_to_julian, julian_to_fixed
from .core.errors import DomainError
from .core.fixed import FixedDate, floor_div, mod_pos
from .core.types import GregorianDate, HebrewDate, IslamicDate, JulianDate
from .queries import MONDAY, SATURDAY, SUNDAY, THURSDAY, day_of_week, kday_on_or_before, nth_kday_in_month

logger = logging.getLogger(__name__)

DstSchedule = Literal["post2007", "pre2007", "auto"]
DST_SCHEDULES = ("post2007", "pre2007", "auto")

# Anno Mundi year in which a Gregorian year's autumn (Tishri) falls.
HEBREW_YEAR_OFFSET = 3761


def _year_bounds(year: int):
    return gregorian_new_year(year), gregorian_year_end(year)


# ============================================================
# US holidays
# ============================================================

def independence_day(year: int) -> FixedDate:
    return gregorian_to_fixed(GregorianDate(year, 7, 4))


def labor_day(year: int) -> FixedDate:
    """First Monday in September."""
    return nth_kday_in_month(1, MONDAY, 9, year)


def memorial_day(year: int) -> FixedDate:
    """Last Monday in May."""
    return nth_kday_in_month(-1, MONDAY, 5, year)


def _resolve_schedule(schedule: str, year: int) -> str:
    if schedule not in DST_SCHEDULES:
        raise DomainError(f"Unknown DST schedule {schedule!r}; use one of {DST_SCHEDULES}")
    if schedule == "auto":
        return "post2007" if year >= 2007 else "pre2007"
    return schedule


def daylight_saving_start(year: int, *, schedule: DstSchedule = "post2007") -> FixedDate:
    """
    Second Sunday in March since 2007; first Sunday in April under the
    earlier rules (``schedule="pre2007"``).
    """
    if _resolve_schedule(schedule, year) == "pre2007":
        return nth_kday_in_month(1, SUNDAY, 4, year)
    return nth_kday_in_month(2, SUNDAY, 3, year)


def daylight_saving_end(year: int, *, schedule: DstSchedule = "post2007") -> FixedDate:
    """First Sunday in November since 2007; last Sunday in October before."""
    if _resolve_schedule(schedule, year) == "pre2007":
        return nth_kday_in_month(-1, SUNDAY, 10, year)
    return nth_kday_in_month(1, SUNDAY, 11, year)


# ============================================================
# Christian holidays
# ============================================================

def christmas(year: int) -> FixedDate:
    return gregorian_to_fixed(GregorianDate(year, 12, 25))


def advent(year: int) -> FixedDate:
    """Sunday closest to 30 November."""
    return kday_on_or_before(SUNDAY, gregorian_to_fixed(GregorianDate(year, 12, 3)))


def epiphany(year: int) -> FixedDate:
    """Twelve days after Christmas of ``year``, so 6 January of ``year + 1``."""
    return christmas(year) + 12


def eastern_orthodox_christmas(year: int) -> List[FixedDate]:
    """Julian 25 December; absent from Gregorian years 1100..1199, 1500..1599 and so on."""
    jan_1, dec_31 = _year_bounds(year)
    y = fixed_to_julian(jan_1).year
    out = []
    for julian_year in (y, y + 1):
        c = julian_to_fixed(JulianDate(julian_year, 12, 25))
        if jan_1 <= c <= dec_31:
            out.append(c)
    return out


def nicaean_rule_easter(year: int) -> FixedDate:
    """Easter by the Julian computus (Orthodox Easter), for Julian year ``year``."""
    shifted_epact = mod_pos(14 + 11 * mod_pos(year, 19), 30)
    paschal_moon = julian_to_fixed(JulianDate(year, 4, 19)) - shifted_epact
    return kday_on_or_before(SUNDAY, paschal_moon + 7)


def easter(year: int) -> FixedDate:
    """Gregorian Easter: the Sunday after the ecclesiastical full moon."""
    century = floor_div(year, 100) + 1
    shifted_epact = mod_pos(
        14 + 11 * mod_pos(year, 19)
        - floor_div(3 * century, 4)
        + floor_div(5 + 8 * century, 25)
        + 30 * century,
        30,
    )
    if shifted_epact == 0 or (shifted_epact == 1 and 10 < mod_pos(year, 19)):
        adjusted_epact = shifted_epact + 1
    else:
        adjusted_epact = shifted_epact
    paschal_moon = gregorian_to_fixed(GregorianDate(year, 4, 19)) - adjusted_epact
    return kday_on_or_before(SUNDAY, paschal_moon + 7)


def pentecost(year: int) -> FixedDate:
    return easter(year) + 49


# ============================================================
# Islamic holidays
# ============================================================

def islamic_date_in_gregorian_year(month: int, day: int, year: int) -> List[FixedDate]:
    """
    Every occurrence of Islamic (month, day) in Gregorian ``year``. An Islamic
    year is 11 days shorter, so a date falls in a Gregorian year once or
    twice; 30 Dhu al-Hijjah is skipped in the years that lack it.
    """
    jan_1, dec_31 = _year_bounds(year)
    if dec_31 < ISLAMIC_EPOCH:
        return []
    # Years straddling the epoch start at Islamic year 1.
    y = fixed_to_islamic(max(jan_1, ISLAMIC_EPOCH)).year
    out = []
    for islamic_year in (y, y + 1, y + 2):
        if day > last_day_of_islamic_month(month, islamic_year):
            continue
        d = islamic_to_fixed(IslamicDate(islamic_year, month, day))
        if jan_1 <= d <= dec_31:
            out.append(d)
    return out


def mulad_al_nabi(year: int) -> List[FixedDate]:
    """Birthday of the Prophet, 12 Rabi I."""
    return islamic_date_in_gregorian_year(3, 12, year)


# ============================================================
# Jewish holidays
# ============================================================

def _hebrew_day(year: int, month: int, day: int) -> FixedDate:
    # Days past the end of the month carry into the next month.
    return hebrew_to_fixed(HebrewDate(year, month, 1)) + day - 1


def yom_kippur(year: int) -> FixedDate:
    return hebrew_to_fixed(HebrewDate(year + HEBREW_YEAR_OFFSET, TISHRI, 10))


def passover(year: int) -> FixedDate:
    return hebrew_to_fixed(HebrewDate(year + HEBREW_YEAR_OFFSET - 1, NISAN, 15))


def purim(year: int) -> FixedDate:
    """14 Adar, or 14 Adar II in leap years."""
    h_year = year + HEBREW_YEAR_OFFSET - 1
    return hebrew_to_fixed(HebrewDate(h_year, last_month_of_hebrew_year(h_year), 14))


def ta_anit_esther(year: int) -> FixedDate:
    """Day before Purim, moved back to Thursday when Purim is on Sunday."""
    purim_date = purim(year)
    if day_of_week(purim_date) == SUNDAY:
        return kday_on_or_before(THURSDAY, purim_date)
    return purim_date - 1


def tisha_b_av(year: int) -> FixedDate:
    """9 Av, postponed to Sunday when it falls on the Sabbath."""
    ninth_of_av = hebrew_to_fixed(HebrewDate(year + HEBREW_YEAR_OFFSET - 1, AV, 9))
    if day_of_week(ninth_of_av) == SATURDAY:
        return ninth_of_av + 1
    return ninth_of_av


def hebrew_birthday(birthdate: HebrewDate, h_year: int) -> FixedDate:
    """
    Anniversary of ``birthdate`` in Hebrew year ``h_year``. A birthday in the
    last Adar of its year is kept in the last Adar of every year; a 30th
    of a month that has 29 days in ``h_year`` becomes the 1st of the next.
    """
    if birthdate.month == last_month_of_hebrew_year(birthdate.year):
        return _hebrew_day(h_year, last_month_of_hebrew_year(h_year), birthdate.day)
    return _hebrew_day(h_year, birthdate.month, birthdate.day)


def yahrzeit(death_date: HebrewDate, h_year: int) -> FixedDate:
    """
    Anniversary of a death in Hebrew year ``h_year``. A death on 30 Heshvan
    or 30 Kislev is kept on the 1st of the following month when the year
    after the death lacked that 30th; Adar II follows the last month of
    ``h_year``; 30 Adar in a common year of death is kept on 30 Shevat.
    """
    month, day = death_date.month, death_date.day
    if month == HESHVAN and day == 30 and not long_heshvan(death_date.year + 1):
        return hebrew_to_fixed(HebrewDate(h_year, KISLEV, 1))
    if month == KISLEV and day == 30 and short_kislev(death_date.year + 1):
        return hebrew_to_fixed(HebrewDate(h_year, TEVETH, 1))
    if month == ADAR_II:
        return _hebrew_day(h_year, last_month_of_hebrew_year(h_year), day)
    if month == ADAR and day == 30 and not hebrew_leap_year(death_date.year):
        return hebrew_to_fixed(HebrewDate(h_year, SHEVAT, 30))
    return _hebrew_day(h_year, month, day)


# ============================================================
# Year summary
# ============================================================

def holidays_in_year(year: int, *, dst_schedule: DstSchedule = "post2007") -> Dict[str, List[FixedDate]]:
    """All holidays of Gregorian ``year`` by name, each as a sorted list of fixed dates."""
    single: Dict[str, Callable[[int], FixedDate]] = {
        "independence_day": independence_day,
        "labor_day": labor_day,
        "memorial_day": memorial_day,
        "christmas": christmas,
        "advent": advent,
        "easter": easter,
        "nicaean_rule_easter": nicaean_rule_easter,
        "pentecost": pentecost,
        "yom_kippur": yom_kippur,
        "passover": passover,
        "purim": purim,
        "ta_anit_esther": ta_anit_esther,
        "tisha_b_av": tisha_b_av,
    }
    out: Dict[str, List[FixedDate]] = {name: [fn(year)] for name, fn in single.items()}
    # Epiphany of the previous Christmas season falls in this year.
    out["epiphany"] = [epiphany(year - 1)]
    out["daylight_saving_start"] = [daylight_saving_start(year, schedule=dst_schedule)]
    out["daylight_saving_end"] = [daylight_saving_end(year, schedule=dst_schedule)]
    out["eastern_orthodox_christmas"] = eastern_orthodox_christmas(year)
    out["mulad_al_nabi"] = mulad_al_nabi(year)
    logger.debug("holidays_in_year(%d): %d entries", year, len(out))
    return dict(sorted(out.items(), key=lambda kv: (kv[1][0] if kv[1] else float("inf"), kv[0])))
