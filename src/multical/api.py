from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .attributes.registry import compute_attributes
from .core.engine import CalendarRegistry, RulesFactory
from .core.types import CalendarDate
from .engines.calendar import Calendar

_registry: Optional[CalendarRegistry] = None


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def get_registry() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def list_calendars() -> List[str]:
    return get_registry().list()


def register_calendar(name: str, rules: RulesFactory, *, overwrite: bool = False) -> None:
    get_registry().register(name, rules, overwrite=overwrite)


def instance(name: Optional[str] = None, language: str = "") -> Calendar:
    return get_registry().instance(name, language)


def new_date(
    year: Union[int, CalendarDate, None] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    calendar: Union[str, Calendar, None] = None,
    language: str = "",
) -> CalendarDate:
    return get_registry().new_date(year, month, day, calendar, language)


def calendar_info(name: str, language: str = "") -> Dict[str, Any]:
    cal = instance(name, language)
    return {
        "name": cal.name,
        "display_name": cal.local.name,
        "language": cal.language,
        "has_year_zero": cal.has_year_zero,
        "min_month": cal.min_month,
        "first_month": cal.first_month,
        "min_day": cal.min_day,
        "min_year": cal.rules.min_year,
        "max_year": cal.rules.max_year,
        "is_rtl": cal.local.is_rtl,
    }


def convert(d: CalendarDate, calendar: Union[str, Calendar], language: str = "") -> CalendarDate:
    """The same day in another calendar, via its Julian Day."""
    target = instance(calendar, language) if isinstance(calendar, str) else calendar
    return target.from_jd(d.to_jd())


def from_system_date(d: date, calendar: Optional[str] = None, language: str = "") -> CalendarDate:
    return instance(calendar, language).from_system_date(d)


def date_info(d: CalendarDate, *, attributes: Sequence[str] = ()) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "calendar": d.calendar.name,
        "date": str(d),
        "jd": d.to_jd(),
    }
    if attributes:
        out.update(compute_attributes(d, attributes))
    return out
