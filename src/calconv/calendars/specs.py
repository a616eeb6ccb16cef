"""
calconv.calendars.specs
-----------------------
Pure-data descriptions of the built-in calendars. A spec names its date
record, its epoch and (for the Mayan calendars) its tunable parameters;
``factory.make_engine`` turns it into a live engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Literal, Optional

from ..core.errors import DomainError, UnknownCalendarError
from ..core.fixed import FixedDate
from ..core.types import (
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
from .french import FRENCH_EPOCH
from .gregorian import GREGORIAN_EPOCH
from .hebrew import HEBREW_EPOCH
from .hindu import HINDU_EPOCH
from .islamic import ISLAMIC_EPOCH
from .julian import JULIAN_EPOCH
from .mayan import (
    CALENDAR_ROUND,
    HAAB_CYCLE,
    MAYAN_CORRELATION_GMT,
    TZOLKIN_CYCLE,
)

CalendarKind = Literal["invertible", "cyclic"]


@dataclass(frozen=True)
class MayanParams:
    """Days between the Mayan epoch (0.0.0.0.0) and fixed day 0."""
    correlation: int = MAYAN_CORRELATION_GMT

    @property
    def epoch(self) -> FixedDate:
        return -self.correlation


@dataclass(frozen=True)
class CalendarSpec:
    name: str
    kind: CalendarKind
    record: type
    epoch: Optional[FixedDate]
    params: Optional[MayanParams] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def like(name: str) -> "CalendarSpec":
        if name not in ALL_SPECS:
            raise UnknownCalendarError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "CalendarSpec":
        if not kwargs:
            return self
        if self.params is None:
            raise DomainError(f"Calendar '{self.name}' has no tunable parameters, got {sorted(kwargs)}")
        try:
            params = replace(self.params, **kwargs)
        except TypeError as e:
            raise DomainError(f"Calendar '{self.name}': {e}") from e
        epoch = params.epoch if self.kind == "invertible" else self.epoch
        return replace(self, params=params, epoch=epoch)

    def info(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "name": self.name,
            "kind": self.kind,
            "record": self.record.__name__,
            "epoch": self.epoch,
        }
        if self.params is not None:
            out["params"] = {"correlation": self.params.correlation}
        out.update(self.meta)
        return out


# ============================================================
# BUILT-IN CALENDARS
# ============================================================

GREGORIAN = CalendarSpec(
    name="gregorian", kind="invertible", record=GregorianDate, epoch=GREGORIAN_EPOCH,
    meta={"leap_rule": "divisible by 4, not by 100 unless by 400"},
)

JULIAN = CalendarSpec(
    name="julian", kind="invertible", record=JulianDate, epoch=JULIAN_EPOCH,
    meta={"leap_rule": "divisible by 4"},
)

ISO = CalendarSpec(
    name="iso", kind="invertible", record=IsoDate, epoch=GREGORIAN_EPOCH,
    meta={"week_one": "week containing the first Thursday of January"},
)

ISLAMIC = CalendarSpec(
    name="islamic", kind="invertible", record=IslamicDate, epoch=ISLAMIC_EPOCH,
    meta={"valid_from": ISLAMIC_EPOCH, "cycle_years": 30},
)

HEBREW = CalendarSpec(
    name="hebrew", kind="invertible", record=HebrewDate, epoch=HEBREW_EPOCH,
    meta={"cycle_years": 19},
)

MAYAN_LONG_COUNT = CalendarSpec(
    name="mayan-long-count", kind="invertible", record=MayanLongCount,
    epoch=MayanParams().epoch, params=MayanParams(),
)

MAYAN_HAAB = CalendarSpec(
    name="mayan-haab", kind="cyclic", record=MayanHaab, epoch=None, params=MayanParams(),
    meta={"cycle": HAAB_CYCLE},
)

MAYAN_TZOLKIN = CalendarSpec(
    name="mayan-tzolkin", kind="cyclic", record=MayanTzolkin, epoch=None, params=MayanParams(),
    meta={"cycle": TZOLKIN_CYCLE, "calendar_round": CALENDAR_ROUND},
)

FRENCH = CalendarSpec(
    name="french", kind="invertible", record=FrenchDate, epoch=FRENCH_EPOCH,
    meta={"valid_from": FRENCH_EPOCH},
)

OLD_HINDU_SOLAR = CalendarSpec(
    name="old-hindu-solar", kind="invertible", record=OldHinduSolarDate, epoch=HINDU_EPOCH,
    meta={"epoch_name": "Kali Yuga"},
)

OLD_HINDU_LUNAR = CalendarSpec(
    name="old-hindu-lunar", kind="invertible", record=OldHinduLunarDate, epoch=HINDU_EPOCH,
    meta={"epoch_name": "Kali Yuga"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    spec.name: spec
    for spec in (
        GREGORIAN, JULIAN, ISO, ISLAMIC, HEBREW,
        MAYAN_LONG_COUNT, MAYAN_HAAB, MAYAN_TZOLKIN,
        FRENCH, OLD_HINDU_SOLAR, OLD_HINDU_LUNAR,
    )
}
