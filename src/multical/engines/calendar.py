"""
multical.engines.calendar
-------------------------
The Orchestrator. Binds a per-calendar Rules object to the shared calendar
algorithms: validation, ordinal months, day/week of year, add/set
arithmetic (with the no-year-zero correction) and conversion to and from
Julian Days and datetime.date.

Every public method accepts either a CalendarDate of this calendar or the
numeric (year, month, day) components.
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import MAXYEAR, MINYEAR, date
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Tuple, Type, Union

from ..core.errors import (
    CalendarError,
    DifferentCalendarsError,
    InvalidDateError,
    InvalidMonthError,
    InvalidYearError,
)
from ..core.types import CalendarDate, Locale, Period, normalize_period
from .interfaces import CalendarRules

if TYPE_CHECKING:
    from ..core.engine import CalendarRegistry

logger = logging.getLogger(__name__)

YearOrDate = Union[int, CalendarDate]
YMD = Tuple[int, int, int]


class Calendar:
    """
    One calendar in one language. Built by the registry, which keeps a single
    instance per (name, language).
    """

    def __init__(
        self,
        rules: CalendarRules,
        language: str = "",
        *,
        registry: Optional["CalendarRegistry"] = None,
    ):
        self.rules = rules
        self.language = language
        self.registry = registry
        self.local: Locale = rules.regional_options.get(language) or rules.regional_options[""]

        # Nesting depth of internal computations; validation only runs at 0.
        # A ContextVar keeps the depth local to each thread / task.
        self._depth: ContextVar[int] = ContextVar(f"multical.{rules.name}.validate_depth", default=0)

    def __repr__(self) -> str:
        return f"Calendar({self.name!r}, language={self.language!r})"

    # ---------------------------------------------------------
    # Fixed attributes
    # ---------------------------------------------------------
    @property
    def name(self) -> str:
        return self.rules.name

    @property
    def has_year_zero(self) -> bool:
        return self.rules.has_year_zero

    @property
    def min_month(self) -> int:
        return self.rules.min_month

    @property
    def first_month(self) -> int:
        return self.rules.first_month

    @property
    def min_day(self) -> int:
        return self.rules.min_day

    # ---------------------------------------------------------
    # Validation suppression
    # ---------------------------------------------------------
    @property
    def validating(self) -> bool:
        return self._depth.get() == 0

    @contextmanager
    def validation_suspended(self) -> Iterator[None]:
        token = self._depth.set(self._depth.get() + 1)
        try:
            yield
        finally:
            self._depth.reset(token)

    def _validate(
        self,
        year: YearOrDate,
        month: Optional[int],
        day: Optional[int],
        error: Type[CalendarError],
    ) -> CalendarDate:
        """Return a date for the arguments, checking it at the outermost call only."""
        if isinstance(year, CalendarDate):
            if self.validating and year.calendar.name != self.name:
                raise DifferentCalendarsError(self.local.name, year.calendar.local.name)
            return year
        outermost = self.validating
        with self.validation_suspended():
            if outermost and not self.is_valid(year, month, day):
                raise error(self.local.name)
            return CalendarDate(self, year, month, day)

    def _validate_year(self, year: YearOrDate) -> CalendarDate:
        return self._validate(year, self.min_month, self.min_day, InvalidYearError)

    def _validate_month(self, year: YearOrDate, month: Optional[int]) -> CalendarDate:
        return self._validate(year, month, self.min_day, InvalidMonthError)

    def _validate_date(self, year: YearOrDate, month: Optional[int], day: Optional[int]) -> CalendarDate:
        return self._validate(year, month, day, InvalidDateError)

    def is_valid(self, year: int, month: int, day: int) -> bool:
        if year is None or month is None or day is None:
            return False
        if not self.has_year_zero and year == 0:
            return False
        if self.rules.min_year is not None and year < self.rules.min_year:
            return False
        if self.rules.max_year is not None and year > self.rules.max_year:
            return False
        with self.validation_suspended():
            candidate = CalendarDate(self, year, month, self.min_day)
            if not (self.min_month <= month < self.min_month + self.months_in_year(candidate)):
                return False
            return self.min_day <= day < self.min_day + self.days_in_month(candidate)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------
    def new_date(
        self,
        year: Optional[YearOrDate] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> CalendarDate:
        """Today when called without arguments; a copy when given a date."""
        if year is None:
            return self.today()
        if isinstance(year, CalendarDate):
            self._validate_date(year, month, day)
            year, month, day = year.ymd()
        return CalendarDate(self, year, month, day)

    def today(self) -> CalendarDate:
        return self.from_system_date(date.today())

    # ---------------------------------------------------------
    # Year-level queries
    # ---------------------------------------------------------
    def epoch(self, year: YearOrDate) -> str:
        d = self._validate_year(year)
        return self.local.epochs[0] if d.year < 0 else self.local.epochs[1]

    def format_year(self, year: YearOrDate) -> str:
        d = self._validate_year(year)
        return ("-" if d.year < 0 else "") + str(abs(d.year)).zfill(4)

    def months_in_year(self, year: YearOrDate) -> int:
        d = self._validate_year(year)
        return self.rules.months_in_year(d.year)

    def leap_year(self, year: YearOrDate) -> bool:
        d = self._validate_year(year)
        return self.rules.leap_year(d.year)

    def days_in_year(self, year: YearOrDate) -> int:
        d = self._validate_year(year)
        custom = getattr(self.rules, "days_in_year", None)
        if custom is not None:
            return custom(d.year)
        return 366 if self.rules.leap_year(d.year) else 365

    # ---------------------------------------------------------
    # Month-level queries
    # ---------------------------------------------------------
    def month_of_year(self, year: YearOrDate, month: Optional[int] = None) -> int:
        """Ordinal position of the month within its year, from min_month."""
        d = self._validate_month(year, month)
        n = self.months_in_year(d)
        return (d.month + n - self.first_month) % n + self.min_month

    def from_month_of_year(self, year: int, ordinal: int) -> int:
        """Month number at the given ordinal position of the year."""
        m = (ordinal + self.first_month - 2 * self.min_month) % self.months_in_year(year) + self.min_month
        self._validate_month(year, m)
        return m

    def days_in_month(self, year: YearOrDate, month: Optional[int] = None) -> int:
        d = self._validate_month(year, month)
        return self.rules.days_in_month(d.year, d.month)

    def month_name(self, year: YearOrDate, month: Optional[int] = None, *, form: str = "long") -> str:
        d = self._validate_month(year, month)
        names = self.local.month_names_short if form == "short" else self.local.month_names
        return names[self.month_of_year(d) - self.min_month]

    # ---------------------------------------------------------
    # Day-level queries
    # ---------------------------------------------------------
    def day_of_year(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None) -> int:
        d = self._validate_date(year, month, day)
        with self.validation_suspended():
            first = self.new_date(d.year, self.from_month_of_year(d.year, self.min_month), self.min_day)
            return int(d.to_jd() - first.to_jd()) + 1

    def days_in_week(self) -> int:
        return 7

    def day_of_week(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None) -> int:
        """0 = Sunday."""
        d = self._validate_date(year, month, day)
        return (math.floor(self.to_jd(d)) + 2) % self.days_in_week()

    def day_name(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None,
                 *, form: str = "long") -> str:
        names = {
            "long": self.local.day_names,
            "short": self.local.day_names_short,
            "min": self.local.day_names_min,
        }[form]
        return names[self.day_of_week(year, month, day)]

    def week_of_year(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None) -> int:
        d = self._validate_date(year, month, day)
        with self.validation_suspended():
            jd = self.rules.to_jd(d.year, d.month, d.day) + self.rules.week_anchor_offset(self.day_of_week(d))
            bounds = self.rules.jd_bounds
            if bounds is not None and jd < bounds[0]:
                # Anchor precedes the first year the calendar defines
                return 1
            y = self.rules.from_jd(jd)[0]
            first = self.rules.to_jd(y, self.from_month_of_year(y, self.min_month), self.min_day)
            return int(jd - first) // 7 + 1

    def week_day(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None) -> bool:
        return self.rules.is_week_day(self.day_of_week(year, month, day))

    def extra_info(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None) -> Dict[str, Any]:
        self._validate_date(year, month, day)
        return {}

    def localise_digits(self, value: int) -> str:
        if self.local.digits is None:
            return str(value)
        return self.local.digits(value)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------
    def add(self, d: CalendarDate, offset: int, period: str) -> CalendarDate:
        """Add offset periods (y, m, w or d) to a date, in place."""
        self._validate_date(d, self.min_month, self.min_day)
        p = normalize_period(period)
        return self._correct_add(d, self._add(d, offset, p), offset, p)

    def _add(self, d: CalendarDate, offset: int, period: Period) -> YMD:
        with self.validation_suspended():
            if period in ("d", "w"):
                jd = d.to_jd() + offset * (self.days_in_week() if period == "w" else 1)
                return d.calendar.from_jd(jd).ymd()

            y = d.year + (offset if period == "y" else 0)
            m = d.month_of_year() + (offset if period == "m" else 0)
            day = d.day
            if period == "y":
                if d.month != self.from_month_of_year(y, m):
                    # Same raw month sits at another ordinal position in year y
                    m = self.new_date(y, d.month, self.min_day).month_of_year()
                m = min(m, self.months_in_year(y))
                day = min(day, self.days_in_month(y, self.from_month_of_year(y, m)))
            else:
                y, m = self._resync_year_month(y, m)
                day = min(day, self.days_in_month(y, self.from_month_of_year(y, m)))
            return y, self.from_month_of_year(y, m), day

    def _resync_year_month(self, y: int, m: int) -> Tuple[int, int]:
        """Carry/borrow years until the ordinal month m fits in year y."""
        while m < self.min_month:
            y -= 1
            m += self.months_in_year(y)
        year_months = self.months_in_year(y)
        while m > year_months - 1 + self.min_month:
            y += 1
            m -= year_months
            year_months = self.months_in_year(y)
        return y, m

    def _correct_add(self, d: CalendarDate, ymd: YMD, offset: int, period: Period) -> CalendarDate:
        if not self.has_year_zero:
            landed_in_zero = ymd[0] == 0
            # JD arithmetic (days/weeks) already steps over year zero correctly
            crossed_zero = period in ("y", "m") and (d.year > 0) != (ymd[0] > 0)
            if landed_in_zero or crossed_zero:
                direction = -1 if offset < 0 else 1
                with self.validation_suspended():
                    if period == "y":
                        adjusted, unit = offset + direction, "y"
                    elif period == "m":
                        adjusted, unit = offset + direction * self.months_in_year(-1), "m"
                    else:
                        per = self.days_in_week() if period == "w" else 1
                        adjusted, unit = offset * per + direction * self.days_in_year(-1), "d"
                logger.debug("%s: %s%+d%s crosses year zero; re-adding %+d%s",
                             self.name, d, offset, period, adjusted, unit)
                ymd = self._add(d, adjusted, unit)
        return d.assign(*ymd)

    def set(self, d: CalendarDate, value: int, period: str) -> CalendarDate:
        """Overwrite the year, month or day of a date, in place."""
        self._validate_date(d, self.min_month, self.min_day)
        p = normalize_period(period)
        y = value if p == "y" else d.year
        m = value if p == "m" else d.month
        day = value if p == "d" else d.day
        if p == "y":
            self._validate_year(y)
        if p in ("y", "m"):
            day = min(day, self.days_in_month(y, m))
        return d.assign(y, m, day)

    # ---------------------------------------------------------
    # Julian Day and datetime.date
    # ---------------------------------------------------------
    def to_jd(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None) -> float:
        d = self._validate_date(year, month, day)
        return self.rules.to_jd(d.year, d.month, d.day)

    def from_jd(self, jd: float) -> CalendarDate:
        bounds = self.rules.jd_bounds
        if bounds is not None and not (bounds[0] <= jd < bounds[1]):
            raise InvalidDateError(self.local.name)
        return self.new_date(*self.rules.from_jd(jd))

    def _gregorian(self) -> "Calendar":
        if self.registry is None:
            from ..api import get_registry
            return get_registry().instance()
        return self.registry.instance()

    def to_system_date(self, year: YearOrDate, month: Optional[int] = None, day: Optional[int] = None) -> date:
        d = self._validate_date(year, month, day)
        g = self._gregorian().from_jd(self.to_jd(d))
        if not (MINYEAR <= g.year <= MAXYEAR):
            raise InvalidYearError(self.local.name)
        return date(g.year, g.month, g.day)

    def from_system_date(self, d: date) -> CalendarDate:
        return self.from_jd(self._gregorian().to_jd(d.year, d.month, d.day))
