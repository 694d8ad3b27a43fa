"""
multical.engines.gregorian
--------------------------
Proleptic Gregorian calendar, no year zero (1 BCE is year -1).

Julian Day conversion follows Jean Meeus, "Astronomical Algorithms", ch. 7,
with the Gregorian century correction applied for every date.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from ..core.types import Locale
from ..digits import substitute_chinese_digits

JD_EPOCH = 1721425.5  # 1 January 1 CE

DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

REGIONAL_OPTIONS: Dict[str, Locale] = {
    "": Locale(
        name="Gregorian",
        epochs=("BCE", "CE"),
        month_names=("January", "February", "March", "April", "May", "June",
                     "July", "August", "September", "October", "November", "December"),
        month_names_short=("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        day_names=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        day_names_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        day_names_min=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
        digits=None,
        date_format="mm/dd/yyyy",
        first_day=0,
        is_rtl=False,
    ),
    "zh-CN": Locale(
        name="公历",
        epochs=("公元前", "公元"),
        month_names=("一月", "二月", "三月", "四月", "五月", "六月",
                     "七月", "八月", "九月", "十月", "十一月", "十二月"),
        month_names_short=("一", "二", "三", "四", "五", "六",
                           "七", "八", "九", "十", "十一", "十二"),
        day_names=("星期日", "星期一", "星期二", "星期三", "星期四", "星期五", "星期六"),
        day_names_short=("周日", "周一", "周二", "周三", "周四", "周五", "周六"),
        day_names_min=("日", "一", "二", "三", "四", "五", "六"),
        digits=substitute_chinese_digits(
            ("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九"), ("", "十", "百", "千")),
        date_format="yyyy-mm-dd",
        first_day=1,
        is_rtl=False,
    ),
}


def _astronomical(year: int) -> int:
    """Map no-year-zero numbering onto astronomical years (1 BCE -> 0)."""
    return year + 1 if year < 0 else year


class GregorianRules:
    name = "Gregorian"
    has_year_zero = False
    min_month = 1
    first_month = 1
    min_day = 1
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    jd_bounds: Optional[Tuple[float, float]] = None
    regional_options = REGIONAL_OPTIONS

    def months_in_year(self, year: int) -> int:
        return 12

    def leap_year(self, year: int) -> bool:
        y = _astronomical(year)
        return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

    def days_in_month(self, year: int, month: int) -> int:
        return DAYS_PER_MONTH[month - 1] + (1 if month == 2 and self.leap_year(year) else 0)

    def to_jd(self, year: int, month: int, day: int) -> float:
        y = _astronomical(year)
        m = month
        if m < 3:
            m += 12
            y -= 1
        a = y // 100
        b = 2 - a + a // 4
        return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5

    def from_jd(self, jd: float) -> Tuple[int, int, int]:
        z = math.floor(jd + 0.5)
        a = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + a - a // 4
        b = a + 1524
        c = math.floor((b - 122.1) / 365.25)
        d = math.floor(365.25 * c)
        e = math.floor((b - d) / 30.6001)
        day = b - d - math.floor(e * 30.6001)
        month = e - (13 if e > 13.5 else 1)
        year = c - (4716 if month > 2.5 else 4715)
        if year <= 0:
            year -= 1  # no year zero
        return year, month, day

    def week_anchor_offset(self, day_of_week: int) -> int:
        # ISO 8601: a week belongs to the year holding its Thursday
        return 4 - (day_of_week or 7)

    def is_week_day(self, day_of_week: int) -> bool:
        return (day_of_week or 7) < 6
