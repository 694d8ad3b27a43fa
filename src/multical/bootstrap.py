"""Builds the process default registry from the built-in calendar specs."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from multical.core.engine import CalendarRegistry
from multical.engines.specs import ALL_SPECS, CalendarSpec

logger = logging.getLogger(__name__)


def build_registry(specs: Optional[Iterable[CalendarSpec]] = None, *, default: str = "gregorian") -> CalendarRegistry:
    """A registry holding one rules factory per spec (all built-ins when specs is None)."""
    registry = CalendarRegistry(default=default)
    for spec in (ALL_SPECS.values() if specs is None else specs):
        registry.register(spec.key, spec.rules)
    logger.debug("Registered calendars: %s", ", ".join(registry.list()))
    return registry
