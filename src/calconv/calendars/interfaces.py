"""
calconv.calendars.interfaces
----------------------------
The two shapes a calendar engine comes in.

Invertible calendars (Gregorian, Hebrew, Old Hindu, ...) name every day
once, so ``to_fixed`` and ``from_fixed`` are inverses on valid dates.

Cyclic calendars (haab, tzolkin) name a position in a repeating cycle.
``from_fixed`` is total, but a position corresponds to infinitely many
fixed dates, one per cycle; every inverse therefore needs an anchor and
returns the occurrence nearest to it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from ..core.fixed import FixedDate
from ..core.types import CalendarDate


class InvertibleCalendarProtocol(Protocol):
    @property
    def name(self) -> str: ...

    def info(self) -> Dict[str, Any]: ...

    def to_fixed(self, d: CalendarDate, *, anchor: Optional[FixedDate] = None) -> FixedDate:
        """Fixed date of ``d``; ``anchor`` is accepted and ignored."""
        ...

    def from_fixed(self, fixed: FixedDate) -> CalendarDate: ...


class CyclicCalendarProtocol(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def cycle(self) -> int:
        """Length of the cycle in days."""
        ...

    def info(self) -> Dict[str, Any]: ...

    def from_fixed(self, fixed: FixedDate) -> CalendarDate: ...

    def to_fixed(self, d: CalendarDate, *, anchor: Optional[FixedDate] = None) -> FixedDate:
        """Occurrence of ``d`` nearest ``anchor``; NotInvertibleError without one."""
        ...

    def on_or_before(self, d: CalendarDate, fixed: FixedDate) -> FixedDate:
        """Latest occurrence of ``d`` on or before ``fixed``."""
        ...

    def nearest(self, d: CalendarDate, anchor: FixedDate) -> FixedDate: ...
