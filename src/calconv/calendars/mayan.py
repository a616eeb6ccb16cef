"""
calconv.calendars.mayan
-----------------------
Mayan long count, haab and tzolkin.

The long count is a mixed-radix day count (kin 20, uinal 18, tun/katun/baktun
20) from the Mayan epoch; ``correlation`` is the number of days between
that epoch and fixed day 0. The haab (365 days) and the tzolkin (260 days)
are pure cycles: a haab or tzolkin position recurs every 365 / 260 days and
a (haab, tzolkin) pair every 18980 days, so none of them has an inverse
without an anchor date. Every inverse here takes one.
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import NonexistentDateError, NotInvertibleError
from ..core.fixed import FixedDate, amod, floor_div, mod_pos
from ..core.types import MayanHaab, MayanLongCount, MayanTzolkin

# Goodman-Martinez-Thompson correlation as used by Reingold & Dershowitz (2018).
MAYAN_CORRELATION_GMT = 1137142
# Original GMT value and Spinden's correlation, quoted by Reingold et al. (1993).
MAYAN_CORRELATION_GMT_1993 = 1137140
MAYAN_CORRELATION_SPINDEN = 1232041

MAYAN_EPOCH: FixedDate = -MAYAN_CORRELATION_GMT

KIN, UINAL, TUN, KATUN, BAKTUN = 1, 20, 360, 7200, 144000
HAAB_CYCLE = 365
TZOLKIN_CYCLE = 260
CALENDAR_ROUND = 18980

# Positions at long count 0.0.0.0.0: 8 Cumku and 4 Ahau.
HAAB_AT_EPOCH = MayanHaab(day=8, month=18)
TZOLKIN_AT_EPOCH = MayanTzolkin(number=4, name=20)


# ============================================================
# Long count
# ============================================================

def mayan_long_count_to_fixed(d: MayanLongCount, *, correlation: int = MAYAN_CORRELATION_GMT) -> FixedDate:
    days = d.baktun * BAKTUN + d.katun * KATUN + d.tun * TUN + d.uinal * UINAL + d.kin
    return days - correlation


def fixed_to_mayan_long_count(fixed: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT) -> MayanLongCount:
    days = fixed + correlation
    baktun = floor_div(days, BAKTUN)
    day_of_baktun = mod_pos(days, BAKTUN)
    katun = floor_div(day_of_baktun, KATUN)
    day_of_katun = mod_pos(day_of_baktun, KATUN)
    tun = floor_div(day_of_katun, TUN)
    day_of_tun = mod_pos(day_of_katun, TUN)
    uinal = floor_div(day_of_tun, UINAL)
    kin = mod_pos(day_of_tun, UINAL)
    return MayanLongCount(baktun, katun, tun, uinal, kin)


# ============================================================
# Haab
# ============================================================

def fixed_to_mayan_haab(fixed: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT) -> MayanHaab:
    count = fixed + correlation
    day_of_haab = mod_pos(count + HAAB_AT_EPOCH.day + 20 * (HAAB_AT_EPOCH.month - 1), HAAB_CYCLE)
    return MayanHaab(day=mod_pos(day_of_haab, 20), month=floor_div(day_of_haab, 20) + 1)


def mayan_haab_difference(d1: MayanHaab, d2: MayanHaab) -> int:
    """Days from haab d1 forward to the next (or same) haab d2, in 0..364."""
    return mod_pos(20 * (d2.month - d1.month) + (d2.day - d1.day), HAAB_CYCLE)


def mayan_haab_on_or_before(d: MayanHaab, fixed: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT) -> FixedDate:
    """Latest fixed date on or before ``fixed`` whose haab is ``d``."""
    offset = mayan_haab_difference(fixed_to_mayan_haab(0, correlation=correlation), d)
    return fixed - mod_pos(fixed - offset, HAAB_CYCLE)


def mayan_haab_on_or_after(d: MayanHaab, fixed: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT) -> FixedDate:
    return mayan_haab_on_or_before(d, fixed + HAAB_CYCLE - 1, correlation=correlation)


def mayan_haab_nearest(d: MayanHaab, anchor: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT) -> FixedDate:
    """Occurrence of ``d`` within 182 days of ``anchor``."""
    return mayan_haab_on_or_before(d, anchor + HAAB_CYCLE // 2, correlation=correlation)


def mayan_haab_to_fixed(
    d: MayanHaab, anchor: Optional[FixedDate] = None, *, correlation: int = MAYAN_CORRELATION_GMT
) -> FixedDate:
    if anchor is None:
        raise NotInvertibleError(
            f"Haab {d.day}/{d.month} recurs every {HAAB_CYCLE} days; pass an anchor fixed date"
        )
    return mayan_haab_nearest(d, anchor, correlation=correlation)


# ============================================================
# Tzolkin
# ============================================================

def fixed_to_mayan_tzolkin(fixed: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT) -> MayanTzolkin:
    count = fixed + correlation
    return MayanTzolkin(
        number=amod(count + TZOLKIN_AT_EPOCH.number, 13),
        name=amod(count + TZOLKIN_AT_EPOCH.name, 20),
    )


def mayan_tzolkin_difference(d1: MayanTzolkin, d2: MayanTzolkin) -> int:
    """Days from tzolkin d1 forward to the next (or same) tzolkin d2, in 0..259."""
    number_difference = d2.number - d1.number
    name_difference = d2.name - d1.name
    # 13 * (-3) = -39 = 1 (mod 20): solve x = number_diff (mod 13), x = name_diff (mod 20)
    return mod_pos(
        number_difference + 13 * mod_pos(3 * (number_difference - name_difference), 20),
        TZOLKIN_CYCLE,
    )


def mayan_tzolkin_on_or_before(
    d: MayanTzolkin, fixed: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT
) -> FixedDate:
    offset = mayan_tzolkin_difference(fixed_to_mayan_tzolkin(0, correlation=correlation), d)
    return fixed - mod_pos(fixed - offset, TZOLKIN_CYCLE)


def mayan_tzolkin_on_or_after(
    d: MayanTzolkin, fixed: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT
) -> FixedDate:
    return mayan_tzolkin_on_or_before(d, fixed + TZOLKIN_CYCLE - 1, correlation=correlation)


def mayan_tzolkin_nearest(d: MayanTzolkin, anchor: FixedDate, *, correlation: int = MAYAN_CORRELATION_GMT) -> FixedDate:
    """Occurrence of ``d`` in [anchor - 129, anchor + 130]; ties go to the later date."""
    return mayan_tzolkin_on_or_before(d, anchor + TZOLKIN_CYCLE // 2, correlation=correlation)


def mayan_tzolkin_to_fixed(
    d: MayanTzolkin, anchor: Optional[FixedDate] = None, *, correlation: int = MAYAN_CORRELATION_GMT
) -> FixedDate:
    if anchor is None:
        raise NotInvertibleError(
            f"Tzolkin {d.number}/{d.name} recurs every {TZOLKIN_CYCLE} days; pass an anchor fixed date"
        )
    return mayan_tzolkin_nearest(d, anchor, correlation=correlation)


# ============================================================
# Calendar round (haab + tzolkin)
# ============================================================

def mayan_calendar_round_on_or_before(
    haab: MayanHaab,
    tzolkin: MayanTzolkin,
    fixed: FixedDate,
    *,
    correlation: int = MAYAN_CORRELATION_GMT,
) -> FixedDate:
    """
    Latest fixed date on or before ``fixed`` with the given haab and tzolkin.
    Only one in five combinations ever occurs; the others raise
    NonexistentDateError.
    """
    haab_offset = mayan_haab_difference(fixed_to_mayan_haab(0, correlation=correlation), haab)
    tzolkin_offset = mayan_tzolkin_difference(fixed_to_mayan_tzolkin(0, correlation=correlation), tzolkin)
    difference = tzolkin_offset - haab_offset
    if mod_pos(difference, 5) != 0:
        raise NonexistentDateError(
            f"Haab {haab.day}/{haab.month} never coincides with tzolkin {tzolkin.number}/{tzolkin.name}"
        )
    return fixed - mod_pos(fixed - (haab_offset + HAAB_CYCLE * difference), CALENDAR_ROUND)


def mayan_calendar_round_nearest(
    haab: MayanHaab,
    tzolkin: MayanTzolkin,
    anchor: FixedDate,
    *,
    correlation: int = MAYAN_CORRELATION_GMT,
) -> FixedDate:
    return mayan_calendar_round_on_or_before(haab, tzolkin, anchor + CALENDAR_ROUND // 2, correlation=correlation)
