# tests/test_validation.py

import threading

import pytest

from multical import CalendarDate, CalendarRegistry, InvalidDateError
from multical.engines.gregorian import GregorianRules


def _calendar():
    return CalendarRegistry({"gregorian": GregorianRules}).instance("gregorian")


def _count_is_valid(monkeypatch, cal):
    calls = []
    original = cal.is_valid

    def counting(year, month, day):
        calls.append((year, month, day))
        return original(year, month, day)

    monkeypatch.setattr(cal, "is_valid", counting)
    return calls


def test_suspension_skips_construction_checks():
    cal = _calendar()
    with cal.validation_suspended():
        assert not cal.validating
        d = CalendarDate(cal, 2023, 2, 30)
        assert d.ymd() == (2023, 2, 30)
    assert cal.validating
    with pytest.raises(InvalidDateError):
        CalendarDate(cal, 2023, 2, 30)


def test_suspension_nests():
    cal = _calendar()
    with cal.validation_suspended():
        with cal.validation_suspended():
            assert not cal.validating
        assert not cal.validating
    assert cal.validating


def test_depth_restored_after_exception():
    cal = _calendar()
    with pytest.raises(RuntimeError):
        with cal.validation_suspended():
            raise RuntimeError("boom")
    assert cal.validating

    d = cal.new_date(2024, 1, 31)
    with pytest.raises(ValueError):
        d.add(1, "fortnight")
    assert cal.validating


def test_suspension_is_local_to_thread():
    cal = _calendar()
    seen = []
    with cal.validation_suspended():
        t = threading.Thread(target=lambda: seen.append(cal.validating))
        t.start()
        t.join()
        assert not cal.validating
    assert seen == [True]


def test_suspension_is_per_calendar():
    reg = CalendarRegistry({"gregorian": GregorianRules})
    en = reg.instance("gregorian")
    zh = reg.instance("gregorian", "zh-CN")
    with en.validation_suspended():
        assert zh.validating


@pytest.mark.parametrize(
    "method, args",
    [
        ("to_jd", (2024, 2, 29)),
        ("day_of_year", (2024, 3, 1)),
        ("day_of_week", (2024, 3, 1)),
        ("month_of_year", (2024, 3)),
        ("days_in_year", (2024,)),
        ("week_of_year", (2024, 3, 1)),
    ],
)
def test_one_validation_per_external_call(monkeypatch, method, args):
    cal = _calendar()
    calls = _count_is_valid(monkeypatch, cal)
    getattr(cal, method)(*args)
    assert len(calls) == 1


def test_add_validates_the_result_once(monkeypatch):
    cal = _calendar()
    d = cal.new_date(1, 3, 15)
    calls = _count_is_valid(monkeypatch, cal)
    d.add(-3, "m")
    assert d.ymd() == (-1, 12, 15)
    assert calls == [(-1, 12, 15)]
