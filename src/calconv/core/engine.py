from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .errors import UnknownCalendarError
from .fixed import FixedDate
from .types import CalendarDate

logger = logging.getLogger(__name__)


class CalendarEngine(Protocol):
    @property
    def name(self) -> str: ...
    def info(self) -> Dict[str, Any]: ...
    def to_fixed(self, d: CalendarDate, *, anchor: Optional[FixedDate] = None) -> FixedDate: ...
    def from_fixed(self, fixed: FixedDate) -> CalendarDate: ...


@dataclass
class CalendarRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._engines

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering calendar %r (overwrite=%s)", name, overwrite)
        self._engines[name] = engine
