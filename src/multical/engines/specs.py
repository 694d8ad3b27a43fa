from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict

from .interfaces import CalendarRules
from .gregorian import GregorianRules
from .ummalqura import UmmAlQuraRules


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload describing one registrable calendar."""
    key: str
    rules: Callable[[], CalendarRules]
    description: str = ""

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


GREGORIAN = CalendarSpec(
    key="gregorian",
    rules=GregorianRules,
    description="Proleptic Gregorian calendar (Meeus Julian Day formulas), no year zero",
)

UMMALQURA = CalendarSpec(
    key="ummalqura",
    rules=UmmAlQuraRules,
    description="Umm al-Qura lunar calendar, tabulated for 1276-1500 AH",
)

ALL_SPECS: Dict[str, CalendarSpec] = {s.key: s for s in (GREGORIAN, UMMALQURA)}
