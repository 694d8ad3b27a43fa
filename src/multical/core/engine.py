from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple, Union

from .errors import UnknownCalendarError
from .types import CalendarDate

if TYPE_CHECKING:
    from ..engines.calendar import Calendar
    from ..engines.interfaces import CalendarRules

logger = logging.getLogger(__name__)

RulesFactory = Callable[[], "CalendarRules"]


@dataclass
class CalendarRegistry:
    """
    Calendar name -> rules factory, plus the cache of built calendars.

    Each (name, language) pair is built at most once; concurrent first
    requests for the same pair all receive the same instance.
    """
    _factories: Dict[str, RulesFactory] = field(default_factory=dict)
    default: str = "gregorian"
    _instances: Dict[Tuple[str, str], "Calendar"] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self._factories = {name.lower(): f for name, f in self._factories.items()}

    def list(self) -> List[str]:
        return sorted(self._factories.keys())

    def register(self, name: str, factory: RulesFactory, *, overwrite: bool = False) -> None:
        key = name.lower()
        with self._lock:
            if (not overwrite) and (key in self._factories):
                raise KeyError(f"Calendar '{key}' already exists. Use overwrite=True to replace.")
            self._factories[key] = factory
            for cached in [k for k in self._instances if k[0] == key]:
                del self._instances[cached]

    def instance(self, name: Optional[str] = None, language: str = "") -> "Calendar":
        """The calendar registered as name (case-insensitive) localised for language."""
        from ..engines.factory import make_calendar

        key = ((name or self.default).lower(), language or "")
        cal = self._instances.get(key)
        if cal is not None:
            return cal
        with self._lock:
            cal = self._instances.get(key)
            if cal is None:
                factory = self._factories.get(key[0])
                if factory is None:
                    raise UnknownCalendarError(key[0])
                cal = make_calendar(factory, key[1], registry=self)
                self._instances[key] = cal
                logger.debug("Built calendar %s for language %r", cal.name, key[1])
            return cal

    def new_date(
        self,
        year: Union[int, CalendarDate, None] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        calendar: Union[str, "Calendar", None] = None,
        language: str = "",
    ) -> CalendarDate:
        """
        A date in the given calendar (name or instance, default Gregorian).
        A CalendarDate as first argument is copied within its own calendar;
        no year at all means today.
        """
        if isinstance(year, CalendarDate):
            cal = year.calendar
        elif calendar is None or isinstance(calendar, str):
            cal = self.instance(calendar, language)
        else:
            cal = calendar
        return cal.new_date(year, month, day)
