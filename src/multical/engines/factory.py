"""
multical.engines.factory
------------------------
Transforms rules factories (from CalendarSpec records) into live Calendar objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from .calendar import Calendar
from .interfaces import CalendarRules

if TYPE_CHECKING:
    from ..core.engine import CalendarRegistry


def make_calendar(
    rules: Callable[[], CalendarRules],
    language: str = "",
    *,
    registry: Optional["CalendarRegistry"] = None,
) -> Calendar:
    """Instantiate the rules and bind them to the shared algorithms."""
    r = rules()
    if "" not in r.regional_options:
        raise TypeError(f"Calendar rules {r.name!r} define no default ('') locale")
    return Calendar(r, language, registry=registry)
