"""
calconv.calendars.factory
-------------------------
Transforms pure data CalendarSpecs into live, executable engines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..core.errors import DomainError, NotInvertibleError
from ..core.fixed import FixedDate
from ..core.types import CalendarDate
from . import french, gregorian, hebrew, hindu, islamic, iso, julian, mayan
from .interfaces import CyclicCalendarProtocol, InvertibleCalendarProtocol
from .specs import CalendarSpec

logger = logging.getLogger(__name__)

ToFixed = Callable[[CalendarDate], FixedDate]
FromFixed = Callable[[FixedDate], CalendarDate]
Engine = Union[InvertibleCalendarProtocol, CyclicCalendarProtocol]

_INVERTIBLE: Dict[str, Tuple[ToFixed, FromFixed]] = {
    "gregorian": (gregorian.gregorian_to_fixed, gregorian.fixed_to_gregorian),
    "julian": (julian.julian_to_fixed, julian.fixed_to_julian),
    "iso": (iso.iso_to_fixed, iso.fixed_to_iso),
    "islamic": (islamic.islamic_to_fixed, islamic.fixed_to_islamic),
    "hebrew": (hebrew.hebrew_to_fixed, hebrew.fixed_to_hebrew),
    "french": (french.french_to_fixed, french.fixed_to_french),
    "old-hindu-solar": (hindu.old_hindu_solar_to_fixed, hindu.fixed_to_old_hindu_solar),
    "old-hindu-lunar": (hindu.old_hindu_lunar_to_fixed, hindu.fixed_to_old_hindu_lunar),
}


def _check_record(spec: CalendarSpec, d: Any) -> None:
    if not isinstance(d, spec.record):
        raise DomainError(f"Calendar '{spec.name}' expects {spec.record.__name__}, got {type(d).__name__}")


@dataclass(frozen=True)
class InvertibleEngine:
    spec: CalendarSpec
    _to_fixed: ToFixed
    _from_fixed: FromFixed

    @property
    def name(self) -> str:
        return self.spec.name

    def info(self) -> Dict[str, Any]:
        return self.spec.info()

    def to_fixed(self, d: CalendarDate, *, anchor: Optional[FixedDate] = None) -> FixedDate:
        _check_record(self.spec, d)
        return self._to_fixed(d)

    def from_fixed(self, fixed: FixedDate) -> CalendarDate:
        return self._from_fixed(fixed)


@dataclass(frozen=True)
class CyclicEngine:
    spec: CalendarSpec
    cycle: int
    _from_fixed: FromFixed
    _on_or_before: Callable[[CalendarDate, FixedDate], FixedDate]
    _nearest: Callable[[CalendarDate, FixedDate], FixedDate]

    @property
    def name(self) -> str:
        return self.spec.name

    def info(self) -> Dict[str, Any]:
        return self.spec.info()

    def from_fixed(self, fixed: FixedDate) -> CalendarDate:
        return self._from_fixed(fixed)

    def to_fixed(self, d: CalendarDate, *, anchor: Optional[FixedDate] = None) -> FixedDate:
        _check_record(self.spec, d)
        if anchor is None:
            raise NotInvertibleError(
                f"'{self.name}' dates recur every {self.cycle} days; pass anchor= to pick one occurrence"
            )
        return self._nearest(d, anchor)

    def on_or_before(self, d: CalendarDate, fixed: FixedDate) -> FixedDate:
        _check_record(self.spec, d)
        return self._on_or_before(d, fixed)

    def nearest(self, d: CalendarDate, anchor: FixedDate) -> FixedDate:
        _check_record(self.spec, d)
        return self._nearest(d, anchor)


def build_mayan_engine(spec: CalendarSpec) -> Engine:
    correlation = spec.params.correlation
    if spec.name == "mayan-long-count":
        return InvertibleEngine(
            spec,
            partial(mayan.mayan_long_count_to_fixed, correlation=correlation),
            partial(mayan.fixed_to_mayan_long_count, correlation=correlation),
        )
    if spec.name == "mayan-haab":
        return CyclicEngine(
            spec,
            mayan.HAAB_CYCLE,
            partial(mayan.fixed_to_mayan_haab, correlation=correlation),
            partial(mayan.mayan_haab_on_or_before, correlation=correlation),
            partial(mayan.mayan_haab_nearest, correlation=correlation),
        )
    if spec.name == "mayan-tzolkin":
        return CyclicEngine(
            spec,
            mayan.TZOLKIN_CYCLE,
            partial(mayan.fixed_to_mayan_tzolkin, correlation=correlation),
            partial(mayan.mayan_tzolkin_on_or_before, correlation=correlation),
            partial(mayan.mayan_tzolkin_nearest, correlation=correlation),
        )
    raise TypeError(f"Unknown Mayan calendar: {spec.name}")


def make_engine(spec: CalendarSpec) -> Engine:
    """The universal entry point."""
    if spec.params is not None:
        engine = build_mayan_engine(spec)
    elif spec.name in _INVERTIBLE:
        to_fixed, from_fixed = _INVERTIBLE[spec.name]
        engine = InvertibleEngine(spec, to_fixed, from_fixed)
    else:
        raise TypeError(f"No engine builder for calendar spec '{spec.name}'")
    logger.debug("built %s engine for %r (params=%s)", spec.kind, spec.name, spec.params)
    return engine
