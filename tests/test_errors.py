# tests/test_errors.py

import pytest

import multical
from multical import (
    CalendarError,
    DifferentCalendarsError,
    InvalidDateError,
    InvalidMonthError,
    InvalidYearError,
    UnknownCalendarError,
    register_messages,
)
from multical.core.errors import ErrorKind, message_template


def test_default_messages():
    assert InvalidDateError("Gregorian").message() == "Invalid Gregorian date"
    assert str(InvalidMonthError("Gregorian")) == "Invalid Gregorian month"
    assert str(InvalidYearError("Umm al-Qura")) == "Invalid Umm al-Qura year"
    assert str(UnknownCalendarError("mayan")) == "Calendar mayan not found"
    assert str(DifferentCalendarsError("Gregorian", "Umm al-Qura")) == \
        "Cannot mix Gregorian and Umm al-Qura dates"


def test_error_kinds_and_bases():
    assert InvalidDateError.kind is ErrorKind.INVALID_DATE
    assert ErrorKind.UNKNOWN_CALENDAR.value == "invalidCalendar"
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(InvalidYearError, CalendarError)
    assert issubclass(UnknownCalendarError, KeyError)
    assert issubclass(DifferentCalendarsError, TypeError)


def test_errors_carry_calendar_names():
    e = DifferentCalendarsError("Gregorian", "Umm al-Qura")
    assert e.names == ("Gregorian", "Umm al-Qura")
    assert e.calendar == "Gregorian"


def test_raised_error_names_the_display_name():
    with pytest.raises(InvalidDateError) as ei:
        multical.new_date(1440, 13, 1, calendar="ummalqura")
    assert ei.value.calendar == "Umm al-Qura"

    with pytest.raises(InvalidDateError) as ei:
        multical.new_date(1440, 13, 1, calendar="ummalqura", language="ar")
    assert ei.value.calendar == "أم القرى"


def test_localised_messages_fall_back_to_default():
    register_messages("xx-test", {ErrorKind.INVALID_DATE: "Mauvaise date {0}"})
    e = InvalidDateError("Gregorian")
    assert e.message("xx-test") == "Mauvaise date Gregorian"
    assert InvalidYearError("Gregorian").message("xx-test") == "Invalid Gregorian year"
    assert message_template(ErrorKind.INVALID_MONTH, "no-such-language") == "Invalid {0} month"
    # str() always uses the default language
    assert str(e) == "Invalid Gregorian date"
