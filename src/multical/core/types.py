from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Callable, Dict, Literal, Optional, Tuple

from .errors import DifferentCalendarsError, InvalidDateError

if TYPE_CHECKING:
    from ..engines.calendar import Calendar

Period = Literal["y", "m", "w", "d"]

_PERIODS: Dict[str, Period] = {
    "y": "y", "year": "y", "years": "y",
    "m": "m", "month": "m", "months": "m",
    "w": "w", "week": "w", "weeks": "w",
    "d": "d", "day": "d", "days": "d",
}


def normalize_period(period: str) -> Period:
    try:
        return _PERIODS[period.lower()]
    except KeyError:
        raise ValueError(f"Unknown period '{period}'. Use one of y, m, w, d") from None


@dataclass(frozen=True)
class Locale:
    """Localised names and presentation settings of one calendar language."""
    name: str
    epochs: Tuple[str, str]
    month_names: Tuple[str, ...]
    month_names_short: Tuple[str, ...]
    day_names: Tuple[str, ...]
    day_names_short: Tuple[str, ...]
    day_names_min: Tuple[str, ...]
    digits: Optional[Callable[[int], str]] = None
    date_format: str = "mm/dd/yyyy"
    first_day: int = 0
    is_rtl: bool = False


def _pad(value: int, length: int) -> str:
    return str(value).zfill(length)


@total_ordering
class CalendarDate:
    """
    A (year, month, day) triple in one calendar.

    All computed properties and arithmetic are delegated to the calendar.
    The date is validated on construction unless the calendar is inside
    its validation-suppression scope.
    """

    def __init__(self, calendar: "Calendar", year: int, month: int, day: int):
        self._calendar = calendar
        self._year = year
        self._month = month
        self._day = day
        if calendar.validating and not calendar.is_valid(year, month, day):
            raise InvalidDateError(calendar.local.name)

    # ---------------------------------------------------------
    # Fields (assignment goes through Calendar.set)
    # ---------------------------------------------------------
    @property
    def calendar(self) -> "Calendar":
        return self._calendar

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self._calendar.set(self, value, "y")

    @property
    def month(self) -> int:
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        self._calendar.set(self, value, "m")

    @property
    def day(self) -> int:
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        self._calendar.set(self, value, "d")

    def assign(self, year: int, month: int, day: int) -> "CalendarDate":
        """Overwrite all three fields at once, validating them together."""
        if not self._calendar.is_valid(year, month, day):
            raise InvalidDateError(self._calendar.local.name)
        self._year, self._month, self._day = year, month, day
        return self

    def ymd(self) -> Tuple[int, int, int]:
        return self._year, self._month, self._day

    def new_date(self, year: Any = None, month: Optional[int] = None, day: Optional[int] = None) -> "CalendarDate":
        return self._calendar.new_date(self if year is None else year, month, day)

    # ---------------------------------------------------------
    # Delegation
    # ---------------------------------------------------------
    def leap_year(self) -> bool:
        return self._calendar.leap_year(self)

    def epoch(self) -> str:
        return self._calendar.epoch(self)

    def format_year(self) -> str:
        return self._calendar.format_year(self)

    def month_of_year(self) -> int:
        return self._calendar.month_of_year(self)

    def week_of_year(self) -> int:
        return self._calendar.week_of_year(self)

    def days_in_year(self) -> int:
        return self._calendar.days_in_year(self)

    def day_of_year(self) -> int:
        return self._calendar.day_of_year(self)

    def days_in_month(self) -> int:
        return self._calendar.days_in_month(self)

    def day_of_week(self) -> int:
        return self._calendar.day_of_week(self)

    def week_day(self) -> bool:
        return self._calendar.week_day(self)

    def extra_info(self) -> Dict[str, Any]:
        return self._calendar.extra_info(self)

    def add(self, offset: int, period: str) -> "CalendarDate":
        return self._calendar.add(self, offset, period)

    def set(self, value: int, period: str) -> "CalendarDate":
        return self._calendar.set(self, value, period)

    def to_jd(self) -> float:
        return self._calendar.to_jd(self)

    def from_jd(self, jd: float) -> "CalendarDate":
        return self._calendar.from_jd(jd)

    def to_system_date(self) -> date:
        return self._calendar.to_system_date(self)

    def from_system_date(self, d: date) -> "CalendarDate":
        return self._calendar.from_system_date(d)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------
    def compare_to(self, other: "CalendarDate") -> int:
        """-1, 0 or +1; months are compared by their position in the year."""
        if self._calendar.name != other._calendar.name:
            raise DifferentCalendarsError(self._calendar.local.name, other._calendar.local.name)
        if self._year != other._year:
            c = self._year - other._year
        elif self._month != other._month:
            c = self.month_of_year() - other.month_of_year()
        else:
            c = self._day - other._day
        return 0 if c == 0 else (-1 if c < 0 else 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._calendar.name == other._calendar.name and self.ymd() == other.ymd()

    def __lt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.compare_to(other) < 0

    __hash__ = None  # mutable

    def __str__(self) -> str:
        sign = "-" if self._year < 0 else ""
        return f"{sign}{_pad(abs(self._year), 4)}-{_pad(self._month, 2)}-{_pad(self._day, 2)}"

    def __repr__(self) -> str:
        return f"CalendarDate({self._calendar.name!r}, {self._year}, {self._month}, {self._day})"
