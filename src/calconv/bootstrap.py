from __future__ import annotations

import logging
from typing import Mapping, Optional

from calconv.calendars.factory import make_engine
from calconv.calendars.specs import ALL_SPECS, CalendarSpec
from calconv.core.engine import CalendarRegistry

logger = logging.getLogger(__name__)


def build_registry(specs: Optional[Mapping[str, CalendarSpec]] = None) -> CalendarRegistry:
    """One engine per spec, registered under the spec's name; the built-in calendars by default."""
    specs = ALL_SPECS if specs is None else specs
    registry = CalendarRegistry({})
    for spec in specs.values():
        registry.register(spec.name, make_engine(spec))
    logger.debug("calendar registry built with %d calendars", len(registry.list()))
    return registry
