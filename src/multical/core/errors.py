from __future__ import annotations

from enum import Enum
from typing import ClassVar, Dict, Mapping


class ErrorKind(str, Enum):
    UNKNOWN_CALENDAR = "invalidCalendar"
    INVALID_DATE = "invalidDate"
    INVALID_MONTH = "invalidMonth"
    INVALID_YEAR = "invalidYear"
    DIFFERENT_CALENDARS = "differentCalendars"


# Message templates per language; '' is the fallback for anything untranslated.
_MESSAGES: Dict[str, Dict[ErrorKind, str]] = {
    "": {
        ErrorKind.UNKNOWN_CALENDAR: "Calendar {0} not found",
        ErrorKind.INVALID_DATE: "Invalid {0} date",
        ErrorKind.INVALID_MONTH: "Invalid {0} month",
        ErrorKind.INVALID_YEAR: "Invalid {0} year",
        ErrorKind.DIFFERENT_CALENDARS: "Cannot mix {0} and {1} dates",
    },
}


def register_messages(language: str, templates: Mapping[ErrorKind, str]) -> None:
    """Add (or extend) the message templates for a language."""
    _MESSAGES.setdefault(language, {}).update(templates)


def message_template(kind: ErrorKind, language: str = "") -> str:
    return _MESSAGES.get(language, {}).get(kind) or _MESSAGES[""][kind]


class CalendarError(Exception):
    """Base error. Carries the kind and the calendar name(s) involved."""

    kind: ClassVar[ErrorKind]

    def __init__(self, *names: str):
        self.names = names
        super().__init__(self.message())

    @property
    def calendar(self) -> str:
        return self.names[0] if self.names else ""

    def message(self, language: str = "") -> str:
        return message_template(self.kind, language).format(*self.names)


class UnknownCalendarError(CalendarError, KeyError):
    """Raised when an unregistered calendar name is requested."""
    kind = ErrorKind.UNKNOWN_CALENDAR

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message()


class InvalidDateError(CalendarError, ValueError):
    kind = ErrorKind.INVALID_DATE


class InvalidMonthError(CalendarError, ValueError):
    kind = ErrorKind.INVALID_MONTH


class InvalidYearError(CalendarError, ValueError):
    kind = ErrorKind.INVALID_YEAR


class DifferentCalendarsError(CalendarError, TypeError):
    """Raised when one operation mixes dates from two calendars."""
    kind = ErrorKind.DIFFERENT_CALENDARS
