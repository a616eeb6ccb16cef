"""calconv public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_engine,
    register_calendar,
    to_fixed,
    from_fixed,
    convert,
)
from .queries import day_of_week, days_between
from .core.errors import (
    CalconvError,
    DomainError,
    NonexistentDateError,
    OutOfRangeError,
    NotInvertibleError,
    SearchLimitError,
    UnknownCalendarError,
)
from .core.fixed import FixedDate, fixed_from_date, date_from_fixed, fixed_from_jdn, jdn_from_fixed
from .core.types import (
    GregorianDate,
    JulianDate,
    IsoDate,
    IslamicDate,
    HebrewDate,
    MayanLongCount,
    MayanHaab,
    MayanTzolkin,
    FrenchDate,
    OldHinduSolarDate,
    OldHinduLunarDate,
)
from .calendars.gregorian import GREGORIAN_EPOCH, gregorian_to_fixed, fixed_to_gregorian
from .calendars.julian import JULIAN_EPOCH, julian_to_fixed, fixed_to_julian
from .calendars.iso import iso_to_fixed, fixed_to_iso
from .calendars.islamic import ISLAMIC_EPOCH, islamic_to_fixed, fixed_to_islamic
from .calendars.hebrew import HEBREW_EPOCH, hebrew_to_fixed, fixed_to_hebrew
from .calendars.mayan import (
    MAYAN_EPOCH,
    mayan_long_count_to_fixed,
    fixed_to_mayan_long_count,
    fixed_to_mayan_haab,
    fixed_to_mayan_tzolkin,
    mayan_haab_to_fixed,
    mayan_tzolkin_to_fixed,
)
from .calendars.french import FRENCH_EPOCH, french_to_fixed, fixed_to_french
from .calendars.hindu import (
    HINDU_EPOCH,
    old_hindu_solar_to_fixed,
    fixed_to_old_hindu_solar,
    old_hindu_lunar_to_fixed,
    fixed_to_old_hindu_lunar,
)

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_engine",
    "register_calendar",
    "to_fixed",
    "from_fixed",
    "convert",
    "day_of_week",
    "days_between",
    "CalconvError",
    "DomainError",
    "NonexistentDateError",
    "OutOfRangeError",
    "NotInvertibleError",
    "SearchLimitError",
    "UnknownCalendarError",
    "FixedDate",
    "fixed_from_date",
    "date_from_fixed",
    "fixed_from_jdn",
    "jdn_from_fixed",
    "GregorianDate",
    "JulianDate",
    "IsoDate",
    "IslamicDate",
    "HebrewDate",
    "MayanLongCount",
    "MayanHaab",
    "MayanTzolkin",
    "FrenchDate",
    "OldHinduSolarDate",
    "OldHinduLunarDate",
    "GREGORIAN_EPOCH",
    "JULIAN_EPOCH",
    "ISLAMIC_EPOCH",
    "HEBREW_EPOCH",
    "MAYAN_EPOCH",
    "FRENCH_EPOCH",
    "HINDU_EPOCH",
    "gregorian_to_fixed",
    "fixed_to_gregorian",
    "julian_to_fixed",
    "fixed_to_julian",
    "iso_to_fixed",
    "fixed_to_iso",
    "islamic_to_fixed",
    "fixed_to_islamic",
    "hebrew_to_fixed",
    "fixed_to_hebrew",
    "mayan_long_count_to_fixed",
    "fixed_to_mayan_long_count",
    "fixed_to_mayan_haab",
    "fixed_to_mayan_tzolkin",
    "mayan_haab_to_fixed",
    "mayan_tzolkin_to_fixed",
    "french_to_fixed",
    "fixed_to_french",
    "old_hindu_solar_to_fixed",
    "fixed_to_old_hindu_solar",
    "old_hindu_lunar_to_fixed",
    "fixed_to_old_hindu_lunar",
]
