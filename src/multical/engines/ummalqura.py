"""
multical.engines.ummalqura
--------------------------
The Umm al-Qura (Saudi) lunar calendar, driven by a table of month starts.

Month lengths are read from the table rather than computed, so the calendar
only exists for the tabulated years (1276-1500 AH). Dates outside that span
are invalid; there is no extrapolation.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from typing import Dict, Tuple

from ..core.types import Locale
from ..digits import substitute_digits
from ._ummalqura_table import LUNATION_OFFSET, MONTH_STARTS

MCJDN_OFFSET = 2400000 - 0.5  # JD = MCJDN + MCJDN_OFFSET

MIN_YEAR = 1276
MAX_YEAR = 1500

# Returned for months the table does not bracket
FALLBACK_MONTH_LENGTH = 30

REGIONAL_OPTIONS: Dict[str, Locale] = {
    "": Locale(
        name="Umm al-Qura",
        epochs=("BH", "AH"),
        month_names=("Al-Muharram", "Safar", "Rabi' al-awwal", "Rabi' Al-Thani", "Jumada Al-Awwal",
                     "Jumada Al-Thani", "Rajab", "Sha'aban", "Ramadan", "Shawwal",
                     "Dhu al-Qi'dah", "Dhu al-Hijjah"),
        month_names_short=("Muh", "Saf", "Rab1", "Rab2", "Jum1", "Jum2",
                           "Raj", "Sha'", "Ram", "Shaw", "DhuQ", "DhuH"),
        day_names=("Yawm al-Ahad", "Yawm al-Ithnain", "Yawm al-Thalāthā’", "Yawm al-Arba‘ā’",
                   "Yawm al-Khamīs", "Yawm al-Jum‘a", "Yawm al-Sabt"),
        day_names_short=("Ahd", "Ith", "Thu", "Arb", "Khm", "Jum", "Sbt"),
        day_names_min=("Ah", "Ith", "Th", "Ar", "Kh", "Ju", "Sa"),
        digits=None,
        date_format="yyyy/mm/dd",
        first_day=6,
        is_rtl=True,
    ),
    "ar": Locale(
        name="أم القرى",
        epochs=("ق.هـ", "هـ"),
        month_names=("المحرم", "صفر", "ربيع الأول", "ربيع الآخر", "جمادى الأولى", "جمادى الآخرة",
                     "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة"),
        month_names_short=("المحرم", "صفر", "ربيع الأول", "ربيع الآخر", "جمادى الأولى", "جمادى الآخرة",
                           "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة"),
        day_names=("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"),
        day_names_short=("أحد", "اثنين", "ثلاثاء", "أربعاء", "خميس", "جمعة", "سبت"),
        day_names_min=("ح", "ن", "ث", "ر", "خ", "ج", "س"),
        digits=substitute_digits("٠١٢٣٤٥٦٧٨٩"),
        date_format="yyyy/mm/dd",
        first_day=6,
        is_rtl=True,
    ),
}


def _index(year: int, month: int) -> int:
    """Table index of the month after (year, month); the month itself starts at index - 1."""
    return 12 * (year - 1) + month - LUNATION_OFFSET


class UmmAlQuraRules:
    name = "UmmAlQura"
    has_year_zero = False
    min_month = 1
    first_month = 1
    min_day = 1
    min_year = MIN_YEAR
    max_year = MAX_YEAR
    jd_bounds: Tuple[float, float] = (
        MONTH_STARTS[_index(MIN_YEAR, 1) - 1] + MCJDN_OFFSET,
        MONTH_STARTS[_index(MAX_YEAR, 12)] + MCJDN_OFFSET,
    )
    regional_options = REGIONAL_OPTIONS

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        i = _index(year, month)
        if 1 <= i < len(MONTH_STARTS):
            return MONTH_STARTS[i] - MONTH_STARTS[i - 1]
        return FALLBACK_MONTH_LENGTH

    def days_in_year(self, year: int) -> int:
        return sum(self.days_in_month(year, m) for m in range(1, 13))

    def leap_year(self, year: int) -> bool:
        return self.days_in_year(year) == 355

    def to_jd(self, year: int, month: int, day: int) -> float:
        mcjdn = day + MONTH_STARTS[_index(year, month) - 1] - 1
        return mcjdn + MCJDN_OFFSET

    def from_jd(self, jd: float) -> Tuple[int, int, int]:
        mcjdn = math.floor(jd + 0.5) - 2400000
        i = bisect_right(MONTH_STARTS, mcjdn)
        lunation = i + LUNATION_OFFSET
        cycles = (lunation - 1) // 12
        year = cycles + 1
        month = lunation - 12 * cycles
        day = mcjdn - MONTH_STARTS[i - 1] + 1
        return year, month, day

    def week_anchor_offset(self, day_of_week: int) -> int:
        # Weeks start on Sunday
        return -day_of_week

    def is_week_day(self, day_of_week: int) -> bool:
        return day_of_week != 5  # Friday
