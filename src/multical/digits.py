"""Digit substitution functions for localised numbers (Locale.digits)."""

from __future__ import annotations

import re
from typing import Callable, Sequence

DigitsFunc = Callable[[int], str]

_DIGIT_RE = re.compile(r"[0-9]")


def substitute_digits(digits: Sequence[str]) -> DigitsFunc:
    """
    Positional substitution: each ASCII digit is swapped for digits[d].

    >>> substitute_digits("٠١٢٣٤٥٦٧٨٩")(1440)
    '١٤٤٠'
    """
    def localise(value: int) -> str:
        return _DIGIT_RE.sub(lambda m: digits[int(m.group())], str(value))
    return localise


def substitute_chinese_digits(digits: Sequence[str], powers: Sequence[str]) -> DigitsFunc:
    """
    Additive (Chinese style) numerals: each non-zero digit is followed by the
    character for its power of ten, zeros are dropped and a leading "one ten"
    is written as "ten".

    digits: characters for 0..9; powers: characters for 1, 10, 100, 1000.
    """
    def localise(value: int) -> str:
        local = ""
        power = 0
        while value > 0:
            units = value % 10
            local = ("" if units == 0 else digits[units] + powers[power]) + local
            power += 1
            value //= 10
        if local.startswith(digits[1] + powers[1]):
            local = local[1:]
        return local or digits[0]
    return localise
