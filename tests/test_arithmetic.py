# tests/test_arithmetic.py

import random

import pytest

import multical
from multical import InvalidDateError, InvalidMonthError, InvalidYearError

greg = multical.instance("gregorian")
hijri = multical.instance("ummalqura")


def test_add_month_clamps_day():
    d = multical.new_date(2024, 1, 31)
    assert d.add(1, "m") is d
    assert d.ymd() == (2024, 2, 29)
    assert multical.new_date(2023, 1, 31).add(1, "month").ymd() == (2023, 2, 28)
    assert multical.new_date(2024, 3, 31).add(-1, "months").ymd() == (2024, 2, 29)


def test_add_months_carries_years():
    assert multical.new_date(2024, 1, 15).add(-1, "m").ymd() == (2023, 12, 15)
    assert multical.new_date(2024, 11, 15).add(14, "m").ymd() == (2026, 1, 15)
    assert multical.new_date(2024, 5, 15).add(-29, "m").ymd() == (2021, 12, 15)
    assert multical.new_date(2024, 5, 15).add(12, "m").ymd() == (2025, 5, 15)


def test_add_years():
    assert multical.new_date(2024, 2, 29).add(1, "y").ymd() == (2025, 2, 28)
    assert multical.new_date(2024, 2, 29).add(4, "year").ymd() == (2028, 2, 29)
    assert multical.new_date(2024, 6, 30).add(-24, "years").ymd() == (2000, 6, 30)


def test_add_days_and_weeks():
    assert multical.new_date(2024, 2, 28).add(1, "d").ymd() == (2024, 2, 29)
    assert multical.new_date(2024, 2, 28).add(2, "days").ymd() == (2024, 3, 1)
    assert multical.new_date(2024, 12, 31).add(1, "d").ymd() == (2025, 1, 1)
    assert multical.new_date(2024, 1, 3).add(-1, "w").ymd() == (2023, 12, 27)
    assert multical.new_date(2024, 1, 1).add(52, "weeks").ymd() == (2024, 12, 30)


def test_add_days_matches_julian_day_offset():
    random.seed(3)
    for _ in range(500):
        jd = greg.to_jd(1, 1, 1) + random.randint(-200000, 900000)
        n = random.randint(-5000, 5000)
        d = greg.from_jd(jd)
        assert d.add(n, "d").to_jd() == jd + n


@pytest.mark.parametrize(
    "start, offset, period, expected",
    [
        ((1, 1, 1), -1, "y", (-1, 1, 1)),
        ((-1, 6, 15), 1, "y", (1, 6, 15)),
        ((-1, 6, 15), 2, "y", (2, 6, 15)),
        ((2, 1, 1), -2, "y", (-1, 1, 1)),
        ((2, 1, 1), -3, "y", (-2, 1, 1)),
        ((1, 3, 15), -3, "m", (-1, 12, 15)),
        ((-1, 11, 15), 2, "m", (1, 1, 15)),
        ((-1, 11, 15), 14, "m", (2, 1, 15)),
        ((-1, 12, 31), 1, "d", (1, 1, 1)),
        ((1, 1, 1), -1, "d", (-1, 12, 31)),
        ((1, 1, 3), -1, "w", (-1, 12, 27)),
    ],
)
def test_add_skips_year_zero(start, offset, period, expected):
    assert multical.new_date(*start).add(offset, period).ymd() == expected


def test_add_then_subtract_is_identity_away_from_clamping():
    random.seed(11)
    for _ in range(300):
        y = random.choice([random.randint(-50, -1), random.randint(1, 50)])
        d = multical.new_date(y, random.randint(1, 12), random.randint(1, 28))
        ymd = d.ymd()
        for period in ("y", "m", "w", "d"):
            n = random.randint(-30, 30)
            assert d.add(n, period).add(-n, period).ymd() == ymd


def test_unknown_period():
    with pytest.raises(ValueError):
        multical.new_date(2024, 1, 1).add(1, "q")


def test_lunar_month_arithmetic():
    d = hijri.new_date(1441, 1, 30)
    assert d.add(1, "m").ymd() == (1441, 2, 29)
    assert hijri.new_date(1440, 12, 29).add(1, "d").ymd() == (1441, 1, 1)
    assert hijri.new_date(1440, 9, 10).add(1, "y").ymd() == (1441, 9, 10)
    assert hijri.new_date(1441, 1, 1).add(-1, "m").ymd() == (1440, 12, 1)


def test_lunar_arithmetic_out_of_range():
    d = hijri.new_date(1500, 12, 1)
    with pytest.raises(InvalidDateError):
        d.add(1, "m")
    with pytest.raises(InvalidDateError):
        d.add(60, "d")
    assert d.ymd() == (1500, 12, 1)
    assert hijri.validating


def test_set_fields():
    d = multical.new_date(2024, 1, 31)
    assert d.set(2, "m").ymd() == (2024, 2, 29)
    assert d.set(2023, "y").ymd() == (2023, 2, 28)
    assert d.set(1, "day").ymd() == (2023, 2, 1)
    with pytest.raises(InvalidMonthError):
        d.set(13, "m")
    with pytest.raises(InvalidDateError):
        d.set(29, "d")
    assert d.ymd() == (2023, 2, 1)


def test_lunar_set_clamps_to_table_lengths():
    d = hijri.new_date(1440, 8, 30)
    assert d.set(9, "m").ymd() == (1440, 9, 29)


def test_set_rejects_year_before_clamping():
    d = multical.new_date(2024, 2, 29)
    with pytest.raises(InvalidYearError):
        d.set(0, "y")
    with pytest.raises(InvalidYearError):
        hijri.new_date(1440, 9, 10).set(1501, "y")
    assert d.ymd() == (2024, 2, 29)
