from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, CalendarRegistry
from .core.errors import DomainError
from .core.fixed import FixedDate
from .core.types import DATE_TYPES, CalendarDate
from .calendars.factory import make_engine as _make_engine
from .calendars.specs import CalendarSpec

_registry: Optional[CalendarRegistry] = None


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def list_calendars() -> List[str]:
    return _reg().list()


def calendar_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()


def get_calendar(name: str, **overrides: Any) -> CalendarEngine:
    """
    The registered engine for ``name``, or, with overrides (e.g.
    ``correlation=1137140`` for the Mayan calendars), a fresh engine built
    from the tweaked spec. The registry is never modified.
    """
    if not overrides:
        return _reg().get(name)
    return _make_engine(CalendarSpec.like(name).tweak(**overrides))


def make_engine(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)


def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)


def _calendar_of(d: Any) -> str:
    if not isinstance(d, DATE_TYPES):
        raise DomainError(f"Not a calendar date record: {d!r}")
    return d.calendar


def to_fixed(
    d: CalendarDate,
    *,
    anchor: Optional[FixedDate] = None,
    calendar: Optional[str] = None,
) -> FixedDate:
    """
    Fixed date of any calendar record. ``calendar`` selects a registered
    engine other than the record's own; ``anchor`` is required for haab and
    tzolkin positions.
    """
    name = calendar if calendar is not None else _calendar_of(d)
    return _reg().get(name).to_fixed(d, anchor=anchor)


def from_fixed(fixed: FixedDate, calendar: str) -> CalendarDate:
    return _reg().get(calendar).from_fixed(fixed)


def convert(d: CalendarDate, target: str, *, anchor: Optional[FixedDate] = None) -> CalendarDate:
    """Always ``from_fixed(to_fixed(d), target)``."""
    return from_fixed(to_fixed(d, anchor=anchor), target)
