"""
Integer Julian Day Numbers for proleptic Gregorian dates.

Fliegel-Van Flandern formulas on astronomical years (1 BCE = 0, 2 BCE = -1),
valid from JDN 0 (24 November 4714 BCE) onwards. They share no code with the
Meeus implementation in multical.engines.gregorian, so the two can be checked
against each other (see multical.diagnostics.round_trip).
"""
from __future__ import annotations
from datetime import date
import math
from typing import Tuple


def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """Astronomical-year Gregorian date -> Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Inverse of ymd_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def to_jdn(d: date) -> int:
    return ymd_to_jdn(d.year, d.month, d.day)

def from_jdn(jdn: int) -> date:
    return date(*jdn_to_ymd(jdn))

def jd_to_jdn(jd: float) -> int:
    """Day number of the civil day containing jd (JD midnight = x.5)."""
    return math.floor(jd + 0.5)

def jdn_to_jd(jdn: int) -> float:
    """JD of the midnight starting day jdn."""
    return jdn - 0.5
