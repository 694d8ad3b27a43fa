"""multical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .attributes import standard as _standard_attributes  # noqa: F401
from .bootstrap import build_registry

from .api import (
    instance,
    new_date,
    list_calendars,
    register_calendar,
    calendar_info,
    convert,
    from_system_date,
    date_info,
    get_registry,
    set_registry,
)
from .core.engine import CalendarRegistry
from .core.errors import (
    CalendarError,
    DifferentCalendarsError,
    InvalidDateError,
    InvalidMonthError,
    InvalidYearError,
    UnknownCalendarError,
    register_messages,
)
from .core.types import CalendarDate, Locale
from .digits import substitute_chinese_digits, substitute_digits
from .engines.calendar import Calendar

# Default registry, installed on import
set_registry(build_registry())

__all__ = [
    "instance",
    "new_date",
    "list_calendars",
    "register_calendar",
    "calendar_info",
    "convert",
    "from_system_date",
    "date_info",
    "get_registry",
    "set_registry",
    "build_registry",
    "CalendarRegistry",
    "Calendar",
    "CalendarDate",
    "Locale",
    "CalendarError",
    "UnknownCalendarError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidYearError",
    "DifferentCalendarsError",
    "register_messages",
    "substitute_digits",
    "substitute_chinese_digits",
]
