from __future__ import annotations
from typing import Any, Dict

from ..core.types import CalendarDate
from .registry import jdn, register_attribute

def weekday(d: CalendarDate) -> Dict[str, Any]:
    """Day of week (0 = Sunday), its name and whether it is a working day."""
    cal = d.calendar
    dow = d.day_of_week()
    return {
        "day_of_week": dow,
        "day_name": cal.local.day_names[dow],
        "week_day": d.week_day(),
    }

def week(d: CalendarDate) -> Dict[str, Any]:
    """Week number under the calendar's own week rule."""
    return {"week_of_year": d.week_of_year()}

def year(d: CalendarDate) -> Dict[str, Any]:
    """Epoch, formatted year, leap flag, year length and day of year."""
    return {
        "epoch": d.epoch(),
        "formatted_year": d.format_year(),
        "leap_year": d.leap_year(),
        "days_in_year": d.days_in_year(),
        "day_of_year": d.day_of_year(),
    }

def month(d: CalendarDate) -> Dict[str, Any]:
    """Month name, ordinal position and length."""
    cal = d.calendar
    return {
        "month_name": cal.month_name(d),
        "month_of_year": d.month_of_year(),
        "days_in_month": d.days_in_month(),
    }

def localised(d: CalendarDate) -> Dict[str, Any]:
    """Year and day in the locale's digits, and the text direction."""
    cal = d.calendar
    return {
        "local_year": cal.localise_digits(abs(d.year)),
        "local_day": cal.localise_digits(d.day),
        "is_rtl": cal.local.is_rtl,
    }

def day_number(d: CalendarDate) -> Dict[str, Any]:
    """Julian Day Number and Modified Chronological JDN of the day."""
    n = jdn(d)
    return {"jdn": n, "mcjdn": n - 2400000}

register_attribute("weekday", weekday)
register_attribute("week", week)
register_attribute("year", year)
register_attribute("month", month)
register_attribute("localised", localised)
register_attribute("day_number", day_number)
