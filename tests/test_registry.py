# tests/test_registry.py

import threading
import time
from datetime import date

import pytest

import multical
from multical import CalendarRegistry, UnknownCalendarError, build_registry
from multical.engines.factory import make_calendar
from multical.engines.gregorian import GregorianRules
from multical.engines.specs import GREGORIAN, UMMALQURA
from multical.engines.ummalqura import UmmAlQuraRules


def _fresh_registry():
    return build_registry()


def test_builtin_calendars_listed():
    assert multical.list_calendars() == ["gregorian", "ummalqura"]


def test_instances_are_cached_per_name_and_language():
    assert multical.instance("gregorian") is multical.instance("gregorian")
    assert multical.instance("GREGORIAN") is multical.instance("gregorian")
    assert multical.instance() is multical.instance("gregorian")
    assert multical.instance("gregorian", "zh-CN") is not multical.instance("gregorian")
    assert multical.instance("UmmAlQura", "ar") is multical.instance("ummalqura", "ar")


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError) as ei:
        multical.instance("nope")
    assert isinstance(ei.value, KeyError)
    assert ei.value.calendar == "nope"
    assert str(ei.value) == "Calendar nope not found"


def test_register_and_overwrite():
    reg = _fresh_registry()
    reg.register("Proleptic", GREGORIAN.rules)
    assert "proleptic" in reg.list()
    first = reg.instance("proleptic")
    assert first.name == "Gregorian"

    with pytest.raises(KeyError):
        reg.register("proleptic", UMMALQURA.rules)

    reg.register("proleptic", UMMALQURA.rules, overwrite=True)
    second = reg.instance("proleptic")
    assert second is not first
    assert second.name == "UmmAlQura"


def test_spec_tweak_registers_variant():
    spec = GREGORIAN.tweak(key="civil", description="Civil calendar")
    assert spec.rules is GregorianRules
    assert GREGORIAN.key == "gregorian"
    reg = _fresh_registry()
    reg.register(spec.key, spec.rules)
    assert reg.new_date(2024, 2, 29, calendar="civil").to_jd() == 2460369.5


def test_default_calendar_is_configurable():
    reg = CalendarRegistry({"ummalqura": UmmAlQuraRules}, default="ummalqura")
    assert reg.instance().name == "UmmAlQura"
    assert reg.new_date(1440, 9, 10).to_jd() == 2458618.5
    with pytest.raises(UnknownCalendarError):
        reg.instance("gregorian")


def test_concurrent_first_access_builds_once():
    calls = []

    def slow_rules():
        calls.append(1)
        time.sleep(0.01)
        return GregorianRules()

    reg = CalendarRegistry({"gregorian": slow_rules})
    barrier = threading.Barrier(8)
    seen = []

    def worker():
        barrier.wait()
        seen.append(reg.instance("gregorian"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(seen) == 8
    assert all(c is seen[0] for c in seen)


def test_make_calendar_requires_default_locale():
    class NoDefaultLocale(GregorianRules):
        regional_options = {"zh-CN": GregorianRules.regional_options["zh-CN"]}

    with pytest.raises(TypeError):
        make_calendar(NoDefaultLocale)


def test_calendar_info():
    info = multical.calendar_info("ummalqura", "ar")
    assert info["name"] == "UmmAlQura"
    assert info["display_name"] == "أم القرى"
    assert info["min_year"] == 1276
    assert info["max_year"] == 1500
    assert info["is_rtl"] is True
    assert info["has_year_zero"] is False
    assert multical.calendar_info("gregorian")["min_year"] is None


def test_swapping_the_default_registry():
    original = multical.get_registry()
    reg = CalendarRegistry({"gregorian": GregorianRules})
    multical.set_registry(reg)
    try:
        assert multical.list_calendars() == ["gregorian"]
        assert multical.instance() is reg.instance()
    finally:
        multical.set_registry(original)
    assert multical.list_calendars() == ["gregorian", "ummalqura"]


def test_register_calendar_through_api():
    original = multical.get_registry()
    multical.set_registry(_fresh_registry())
    try:
        multical.register_calendar("hijri", UmmAlQuraRules)
        d = multical.new_date(1440, 9, 10, calendar="hijri")
        assert d.to_system_date().isoformat() == "2019-05-15"
    finally:
        multical.set_registry(original)


def test_from_system_date():
    d = multical.from_system_date(date(2019, 5, 15), "ummalqura")
    assert d.ymd() == (1440, 9, 10)
    assert multical.from_system_date(date(2019, 5, 15)).ymd() == (2019, 5, 15)


def test_build_registry_from_selected_specs():
    reg = build_registry([UMMALQURA, GREGORIAN.tweak(key="civil")], default="civil")
    assert reg.list() == ["civil", "ummalqura"]
    assert reg.instance().name == "Gregorian"
    assert reg.instance("ummalqura").rules.max_year == 1500


def test_concurrent_register_of_one_name():
    reg = CalendarRegistry()
    barrier = threading.Barrier(8)
    outcomes = []

    def worker():
        barrier.wait()
        try:
            reg.register("shared", GregorianRules)
            outcomes.append("ok")
        except KeyError:
            outcomes.append("taken")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["ok"] + ["taken"] * 7
    assert reg.list() == ["shared"]
