"""
calconv.formatting
------------------
Month and day names, and a one-line rendering of every date record.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .calendars.hebrew import ADAR, hebrew_leap_year
from .core.errors import DomainError
from .core.fixed import FixedDate, mod_pos
from .core.types import (
    CalendarDate,
    FrenchDate,
    GregorianDate,
    HebrewDate,
    IslamicDate,
    IsoDate,
    JulianDate,
    MayanHaab,
    MayanLongCount,
    MayanTzolkin,
    OldHinduLunarDate,
    OldHinduSolarDate,
)

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

GREGORIAN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

ISLAMIC_MONTHS = (
    "Muharram", "Safar", "Rabi I", "Rabi II", "Jumada I", "Jumada II",
    "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qa'da", "Dhu al-Hijja",
)

# Numbered from Nisan; month 13 only exists in leap years.
HEBREW_MONTHS = (
    "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
    "Tishri", "Heshvan", "Kislev", "Teveth", "Shevat", "Adar", "Adar II",
)

FRENCH_MONTHS = (
    "Vendemiaire", "Brumaire", "Frimaire", "Nivose", "Pluviose", "Ventose",
    "Germinal", "Floreal", "Prairial", "Messidor", "Thermidor", "Fructidor",
)

SANSCULOTTIDES = (
    "Jour de la Vertu", "Jour du Genie", "Jour du Travail",
    "Jour de l'Opinion", "Jour des Recompenses", "Jour de la Revolution",
)

HAAB_MONTHS = (
    "Pop", "Uo", "Zip", "Zotz", "Tzec", "Xul", "Yaxkin", "Mol", "Chen", "Yax",
    "Zac", "Ceh", "Mac", "Kankin", "Muan", "Pax", "Kayab", "Cumku", "Uayeb",
)

TZOLKIN_NAMES = (
    "Imix", "Ik", "Akbal", "Kan", "Chicchan", "Cimi", "Manik", "Lamat", "Muluc", "Oc",
    "Chuen", "Eb", "Ben", "Ix", "Men", "Cib", "Caban", "Etznab", "Cauac", "Ahau",
)

# Solar months carry the name of the sun's zodiac sign.
HINDU_SOLAR_MONTHS = (
    "Mesha", "Vrishabha", "Mithuna", "Karka", "Simha", "Kanya",
    "Tula", "Vrischika", "Dhanu", "Makara", "Kumbha", "Mina",
)

HINDU_LUNAR_MONTHS = (
    "Chaitra", "Vaisakha", "Jyaishtha", "Ashadha", "Sravana", "Bhadrapada",
    "Asvina", "Kartika", "Margasirsha", "Pausha", "Magha", "Phalguna",
)

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "gregorian": GREGORIAN_MONTHS,
    "julian": GREGORIAN_MONTHS,
    "islamic": ISLAMIC_MONTHS,
    "hebrew": HEBREW_MONTHS,
    "french": FRENCH_MONTHS,
    "mayan-haab": HAAB_MONTHS,
    "old-hindu-solar": HINDU_SOLAR_MONTHS,
    "old-hindu-lunar": HINDU_LUNAR_MONTHS,
}


def weekday_name(fixed: FixedDate) -> str:
    return WEEKDAY_NAMES[mod_pos(fixed, 7)]


def hebrew_month_name(month: int, year: int) -> str:
    """Adar is "Adar I" in leap years, next to "Adar II"."""
    if month == ADAR and hebrew_leap_year(year):
        return "Adar I"
    return HEBREW_MONTHS[month - 1]


def month_name(d: CalendarDate) -> str:
    if isinstance(d, HebrewDate):
        return hebrew_month_name(d.month, d.year)
    if isinstance(d, FrenchDate) and d.month == 13:
        return "Sansculottides"
    if isinstance(d, OldHinduLunarDate):
        name = HINDU_LUNAR_MONTHS[d.month - 1]
        return f"Adhika {name}" if d.leap_month else name
    table = MONTH_NAMES.get(d.calendar)
    if table is None:
        raise DomainError(f"{type(d).__name__} has no month names")
    return table[d.month - 1]


def format_date(d: CalendarDate) -> str:
    """
    >>> format_date(GregorianDate(-586, 7, 24))
    '24 July -586'
    >>> format_date(MayanLongCount(12, 16, 11, 16, 9))
    '12.16.11.16.9'
    """
    if isinstance(d, IsoDate):
        return f"{d.year:04d}-W{d.week:02d}-{d.day}"
    if isinstance(d, MayanLongCount):
        return ".".join(str(v) for v in d.as_tuple())
    if isinstance(d, MayanHaab):
        return f"{d.day} {HAAB_MONTHS[d.month - 1]}"
    if isinstance(d, MayanTzolkin):
        return f"{d.number} {TZOLKIN_NAMES[d.name - 1]}"
    if isinstance(d, FrenchDate):
        if d.month == 13:
            return f"{SANSCULOTTIDES[d.day - 1]} an {d.year}"
        return f"{d.day} {FRENCH_MONTHS[d.month - 1]} an {d.year}"
    if isinstance(d, (GregorianDate, JulianDate, IslamicDate, HebrewDate, OldHinduSolarDate, OldHinduLunarDate)):
        return f"{d.day} {month_name(d)} {d.year}"
    raise DomainError(f"Cannot format {d!r}")
