"""
Named attribute functions: each maps a CalendarDate to a dict of derived
values, so callers (api.date_info, the CLI's --attr) can ask for groups of
facts about a date by name.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence, Tuple

from ..core.types import CalendarDate
from ..core.time import jd_to_jdn

AttrFunc = Callable[[CalendarDate], Dict[str, Any]]
_REGISTRY: Dict[str, Tuple[AttrFunc, str]] = {}

def register_attribute(name: str, fn: AttrFunc, description: str = "", *, overwrite: bool = False) -> None:
    if (not overwrite) and (name in _REGISTRY):
        raise KeyError(f"Attribute '{name}' already exists. Use overwrite=True to replace.")
    _REGISTRY[name] = (fn, description or (fn.__doc__ or "").strip())

def available_attributes() -> List[str]:
    return sorted(_REGISTRY)

def describe_attribute(name: str) -> str:
    return _lookup(name)[1]

def compute_attributes(d: CalendarDate, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        out.update(_lookup(name)[0](d))
    return out

def _lookup(name: str) -> Tuple[AttrFunc, str]:
    if name not in _REGISTRY:
        raise KeyError(f"Unknown attribute '{name}'. Available: {available_attributes()}")
    return _REGISTRY[name]

# helper for attribute implementations
def jdn(d: CalendarDate) -> int:
    return jd_to_jdn(d.to_jd())
