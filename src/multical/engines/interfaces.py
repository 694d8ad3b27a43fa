"""
multical.engines.interfaces
---------------------------
The boundary between per-calendar primitives (Rules) and the shared
algorithms of the orchestrating Calendar.

A rules object works on raw integers only: it never validates, never builds
date objects and never raises for out-of-range input unless a primitive is
undefined there. Validation, error reporting and arithmetic live in
multical.engines.calendar.Calendar.

Reference frame: all day counts are Julian Days (JD), with midnight at the
half day, e.g. 1 January 1 CE (proleptic Gregorian) = JD 1721425.5.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Tuple

from ..core.types import Locale


class CalendarRules(Protocol):
    name: str
    has_year_zero: bool
    min_month: int
    first_month: int
    min_day: int
    regional_options: Mapping[str, Locale]

    # Hard year bounds (inclusive); None when unbounded.
    min_year: Optional[int]
    max_year: Optional[int]

    # Half-open JD interval from_jd is defined on; None when unbounded.
    jd_bounds: Optional[Tuple[float, float]]

    def months_in_year(self, year: int) -> int:
        ...

    def days_in_month(self, year: int, month: int) -> int:
        ...

    def leap_year(self, year: int) -> bool:
        ...

    def to_jd(self, year: int, month: int, day: int) -> float:
        """JD of the start (midnight) of the given day."""
        ...

    def from_jd(self, jd: float) -> Tuple[int, int, int]:
        """(year, month, day) containing the given JD."""
        ...

    def week_anchor_offset(self, day_of_week: int) -> int:
        """
        Days to move from a date to the day that decides its week number,
        given the date's day of week (0 = Sunday).
        """
        ...

    def is_week_day(self, day_of_week: int) -> bool:
        ...
