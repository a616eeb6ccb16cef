"""
calconv.calendars.hindu
-----------------------
Old Hindu solar and lunar calendars from mean motions (Aryabhata, 499 CE),
in the uncorrected form of Dershowitz & Reingold (1990).

Time is counted in days since the Kali Yuga epoch (fixed date -1132959,
Julian -3101-02-18, i.e. 3102 BCE), when mean sun and mean moon were in conjunction at
sidereal longitude 0. One mahayuga of 4320000 sidereal years holds
1577917828 days and 57753336 sidereal months. The day is identified with
sunrise, taken as 6 am (a quarter day after midnight).

All motions are evaluated with ``Fraction`` so the day boundaries are exact.
The results keep the known one-day deviations from the corrected editions.
"""

from __future__ import annotations

import logging
from fractions import Fraction

from ..core.errors import NonexistentDateError
from ..core.fixed import FixedDate, amod, floor_div, mod_pos, search_cycle_boundary
from ..core.types import OldHinduLunarDate, OldHinduSolarDate

logger = logging.getLogger(__name__)

HINDU_EPOCH: FixedDate = -1132959

SOLAR_SIDEREAL_YEAR = 365 + Fraction(279457, 1080000)          # 1577917828 / 4320000
SOLAR_MONTH = SOLAR_SIDEREAL_YEAR / 12
LUNAR_SIDEREAL_MONTH = 27 + Fraction(4644439, 14438334)
LUNAR_SYNODIC_MONTH = 29 + Fraction(7087771, 13358334)

SUNRISE = Fraction(1, 4)


def hindu_day_count(fixed: FixedDate) -> int:
    """Elapsed days since the Kali Yuga epoch."""
    return fixed - HINDU_EPOCH


def solar_longitude(days: Fraction) -> Fraction:
    """Mean sidereal solar longitude in degrees at a moment ``days`` after the epoch."""
    return mod_pos(days / SOLAR_SIDEREAL_YEAR, 1) * 360


def zodiac(days: Fraction) -> int:
    """Zodiacal sign 1..12 (1 = Mesha) of the mean sun."""
    return floor_div(solar_longitude(days), 30) + 1


def lunar_longitude(days: Fraction) -> Fraction:
    return mod_pos(days / LUNAR_SIDEREAL_MONTH, 1) * 360


def lunar_phase(days: Fraction) -> int:
    """Tithi 1..30: the 12-degree step of the moon's elongation from the sun."""
    return 1 + floor_div(mod_pos(lunar_longitude(days) - solar_longitude(days), 360), 12)


def new_moon(days: Fraction) -> Fraction:
    """Moment of the last mean new moon at or before ``days``."""
    return days - mod_pos(days, LUNAR_SYNODIC_MONTH)


# ============================================================
# Solar
# ============================================================

def fixed_to_old_hindu_solar(fixed: FixedDate) -> OldHinduSolarDate:
    sunrise = hindu_day_count(fixed) + SUNRISE
    year = floor_div(sunrise, SOLAR_SIDEREAL_YEAR)
    month = zodiac(sunrise)
    day = floor_div(mod_pos(sunrise, SOLAR_MONTH), 1) + 1
    return OldHinduSolarDate(year, month, day)


def old_hindu_solar_estimate(d: OldHinduSolarDate) -> FixedDate:
    """The closed-form mean inverse; exact except when the month starts exactly at sunrise."""
    moment = d.year * SOLAR_SIDEREAL_YEAR + (d.month - 1) * SOLAR_MONTH + d.day - SUNRISE
    return floor_div(moment, 1) + HINDU_EPOCH


def old_hindu_solar_to_fixed(d: OldHinduSolarDate) -> FixedDate:
    """
    Least fixed date whose solar date is not before ``d``, searched from the
    closed-form estimate; a month only has 30 or 31 days, so asking for a
    day it lacks raises NonexistentDateError.
    """
    start = old_hindu_solar_estimate(d) - 2
    fixed = search_cycle_boundary(start, lambda f: fixed_to_old_hindu_solar(f) >= d, max_iter=16)
    if fixed_to_old_hindu_solar(fixed) != d:
        raise NonexistentDateError(f"Old Hindu solar month {d.month} of {d.year} has no day {d.day}")
    return fixed


# ============================================================
# Lunar
# ============================================================

def fixed_to_old_hindu_lunar(fixed: FixedDate) -> OldHinduLunarDate:
    sunrise = hindu_day_count(fixed) + SUNRISE
    last_new_moon = new_moon(sunrise)
    next_new_moon = last_new_moon + LUNAR_SYNODIC_MONTH
    day = lunar_phase(sunrise)
    month = amod(zodiac(last_new_moon) + 1, 12)
    # Two new moons in one sign: the first month is the leap (adhika) month.
    leap_month = zodiac(last_new_moon) == zodiac(next_new_moon)
    next_month = next_new_moon + (LUNAR_SYNODIC_MONTH if leap_month else 0)
    year = floor_div(next_month, SOLAR_SIDEREAL_YEAR)
    return OldHinduLunarDate(year, month, leap_month, day)


def old_hindu_lunar_precedes(d1: OldHinduLunarDate, d2: OldHinduLunarDate) -> bool:
    """Chronological order; a leap month comes before the regular month of the same name."""
    return (d1.year, d1.month, not d1.leap_month, d1.day) < (d2.year, d2.month, not d2.leap_month, d2.day)


def old_hindu_lunar_to_fixed(d: OldHinduLunarDate) -> FixedDate:
    """
    First fixed date carrying ``d``. Tithis can be expunged (a whole lunar
    day passing between two sunrises) and leap months only exist in some
    years; such dates raise NonexistentDateError.
    """
    approx = (
        floor_div(d.year * SOLAR_SIDEREAL_YEAR, 1)
        + floor_div((d.month - 2) * LUNAR_SYNODIC_MONTH, 1)
        + HINDU_EPOCH
    )
    # Month 1 can begin up to a day before the mean estimate.
    fixed = search_cycle_boundary(
        approx - 3,
        lambda f: not old_hindu_lunar_precedes(fixed_to_old_hindu_lunar(f), d),
        max_iter=32,
    )
    found = fixed_to_old_hindu_lunar(fixed)
    if found != d:
        logger.debug("old Hindu lunar %s does not occur; first later date is %s", d, found)
        raise NonexistentDateError(f"Old Hindu lunar date {d} does not occur")
    return fixed
