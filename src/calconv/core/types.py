from __future__ import annotations
from dataclasses import dataclass, fields
from typing import ClassVar, Tuple, Union

from .errors import DomainError


def _check_range(record, name: str, lo: int, hi: int) -> None:
    value = getattr(record, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainError(f"{type(record).__name__}.{name} must be an int, got {value!r}")
    if not (lo <= value <= hi):
        raise DomainError(f"{type(record).__name__}.{name}={value} is outside {lo}..{hi}")


def _check_int(record, name: str) -> None:
    value = getattr(record, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainError(f"{type(record).__name__}.{name} must be an int, got {value!r}")


class _Record:
    """Shared helpers for the calendar date records."""
    calendar: ClassVar[str]

    def as_tuple(self) -> Tuple:
        return tuple(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True, order=True)
class GregorianDate(_Record):
    calendar: ClassVar[str] = "gregorian"
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "month", 1, 12)
        _check_range(self, "day", 1, 31)


@dataclass(frozen=True, order=True)
class JulianDate(_Record):
    calendar: ClassVar[str] = "julian"
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "month", 1, 12)
        _check_range(self, "day", 1, 31)


@dataclass(frozen=True, order=True)
class IsoDate(_Record):
    """ISO week date; day 1 is Monday, day 7 is Sunday."""
    calendar: ClassVar[str] = "iso"
    year: int
    week: int
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "week", 1, 53)
        _check_range(self, "day", 1, 7)


@dataclass(frozen=True, order=True)
class IslamicDate(_Record):
    calendar: ClassVar[str] = "islamic"
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "month", 1, 12)
        _check_range(self, "day", 1, 30)


@dataclass(frozen=True)
class HebrewDate(_Record):
    """
    Hebrew date with months numbered from Nisan (1); Tishri (7) starts the
    year and month 13 (Adar II) exists only in leap years. Field order is
    therefore not chronological, so no ordering is derived; compare with
    ``calendars.hebrew.hebrew_precedes`` instead.
    """
    calendar: ClassVar[str] = "hebrew"
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "month", 1, 13)
        _check_range(self, "day", 1, 30)


@dataclass(frozen=True, order=True)
class MayanLongCount(_Record):
    calendar: ClassVar[str] = "mayan-long-count"
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int

    def __post_init__(self) -> None:
        _check_int(self, "baktun")
        _check_range(self, "katun", 0, 19)
        _check_range(self, "tun", 0, 19)
        _check_range(self, "uinal", 0, 17)
        _check_range(self, "kin", 0, 19)


@dataclass(frozen=True)
class MayanHaab(_Record):
    calendar: ClassVar[str] = "mayan-haab"
    day: int
    month: int

    def __post_init__(self) -> None:
        _check_range(self, "month", 1, 19)
        _check_range(self, "day", 0, 19 if self.month < 19 else 4)


@dataclass(frozen=True)
class MayanTzolkin(_Record):
    calendar: ClassVar[str] = "mayan-tzolkin"
    number: int
    name: int

    def __post_init__(self) -> None:
        _check_range(self, "number", 1, 13)
        _check_range(self, "name", 1, 20)


@dataclass(frozen=True, order=True)
class FrenchDate(_Record):
    """French Revolutionary date; month 13 holds the sansculottides."""
    calendar: ClassVar[str] = "french"
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "month", 1, 13)
        _check_range(self, "day", 1, 30 if self.month < 13 else 6)


@dataclass(frozen=True, order=True)
class OldHinduSolarDate(_Record):
    calendar: ClassVar[str] = "old-hindu-solar"
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "month", 1, 12)
        _check_range(self, "day", 1, 31)


@dataclass(frozen=True)
class OldHinduLunarDate(_Record):
    """
    Old Hindu lunar date. ``day`` is the tithi (lunar phase 1..30) current at
    sunrise, so days may repeat or be skipped; a leap month precedes the
    regular month of the same name.
    """
    calendar: ClassVar[str] = "old-hindu-lunar"
    year: int
    month: int
    leap_month: bool
    day: int

    def __post_init__(self) -> None:
        _check_int(self, "year")
        _check_range(self, "month", 1, 12)
        if not isinstance(self.leap_month, bool):
            raise DomainError(f"OldHinduLunarDate.leap_month must be a bool, got {self.leap_month!r}")
        _check_range(self, "day", 1, 30)


CalendarDate = Union[
    GregorianDate, JulianDate, IsoDate, IslamicDate, HebrewDate,
    MayanLongCount, MayanHaab, MayanTzolkin, FrenchDate,
    OldHinduSolarDate, OldHinduLunarDate,
]

DATE_TYPES: Tuple[type, ...] = (
    GregorianDate, JulianDate, IsoDate, IslamicDate, HebrewDate,
    MayanLongCount, MayanHaab, MayanTzolkin, FrenchDate,
    OldHinduSolarDate, OldHinduLunarDate,
)
