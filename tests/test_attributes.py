# tests/test_attributes.py

import pytest

import multical
from multical.attributes.registry import (
    available_attributes,
    compute_attributes,
    describe_attribute,
    register_attribute,
)


def test_builtin_attributes():
    assert {"weekday", "week", "year", "month", "localised", "day_number"} <= set(available_attributes())


def test_weekday_and_week():
    d = multical.new_date(2019, 5, 15)
    out = compute_attributes(d, ["weekday", "week"])
    assert out == {"day_of_week": 3, "day_name": "Wednesday", "week_day": True, "week_of_year": 20}


def test_year_and_month():
    d = multical.new_date(2024, 2, 29)
    out = compute_attributes(d, ["year", "month"])
    assert out["epoch"] == "CE"
    assert out["formatted_year"] == "2024"
    assert out["leap_year"] is True
    assert out["days_in_year"] == 366
    assert out["day_of_year"] == 60
    assert out["month_name"] == "February"
    assert out["month_of_year"] == 2
    assert out["days_in_month"] == 29


def test_localised():
    d = multical.new_date(1440, 9, 10, calendar="ummalqura", language="ar")
    out = compute_attributes(d, ["localised"])
    assert out == {"local_year": "١٤٤٠", "local_day": "١٠", "is_rtl": True}


def test_unknown_attribute():
    with pytest.raises(KeyError):
        compute_attributes(multical.new_date(2024, 1, 1), ["moon_phase"])


def test_custom_attribute():
    register_attribute("jd", lambda d: {"jd": d.to_jd()}, "Julian Day at midnight", overwrite=True)
    assert compute_attributes(multical.new_date(2000, 1, 1), ["jd"]) == {"jd": 2451544.5}
    assert describe_attribute("jd") == "Julian Day at midnight"


def test_duplicate_attribute_rejected():
    with pytest.raises(KeyError):
        register_attribute("week", lambda d: {})


def test_descriptions_default_to_docstrings():
    assert describe_attribute("week") == "Week number under the calendar's own week rule."


def test_day_number():
    d = multical.new_date(1440, 9, 10, calendar="ummalqura")
    assert compute_attributes(d, ["day_number"]) == {"jdn": 2458619, "mcjdn": 58619}
    g = multical.convert(d, "gregorian")
    assert compute_attributes(g, ["day_number"]) == {"jdn": 2458619, "mcjdn": 58619}


def test_date_info():
    d = multical.new_date(1440, 9, 10, calendar="ummalqura")
    info = multical.date_info(d, attributes=["month"])
    assert info["calendar"] == "UmmAlQura"
    assert info["date"] == "1440-09-10"
    assert info["jd"] == 2458618.5
    assert info["month_name"] == "Ramadan"
    assert set(multical.date_info(d)) == {"calendar", "date", "jd"}
