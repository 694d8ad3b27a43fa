# tests/test_cli.py

from multical.cli import main


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "gregorian" in out
    assert "ummalqura" in out


def test_list_attributes(capsys):
    assert main(["list", "--attributes"]) == 0
    out = capsys.readouterr().out
    assert "day_number" in out
    assert "Week number under the calendar's own week rule." in out


def test_info_shorthand_with_attributes(capsys):
    assert main(["2019-05-15", "--attr", "week", "--attr", "weekday"]) == 0
    out = capsys.readouterr().out
    assert "date: 2019-05-15" in out
    assert "week_of_year: 20" in out
    assert "day_name: Wednesday" in out


def test_convert(capsys):
    assert main(["convert", "2024-02-29", "--to", "ummalqura"]) == 0
    out = capsys.readouterr().out
    assert "1445-08-19" in out
    assert "Sha'aban" in out


def test_convert_localised(capsys):
    assert main(["convert", "2019-05-15", "--to", "ummalqura", "--language", "ar"]) == 0
    out = capsys.readouterr().out
    assert "رمضان" in out
    assert "١٤٤٠" in out


def test_add(capsys):
    assert main(["add", "2024-01-31", "1", "month"]) == 0
    assert capsys.readouterr().out.strip() == "2024-02-29"


def test_invalid_date_reports_error(capsys):
    assert main(["info", "2023-02-29"]) == 2
    err = capsys.readouterr().err
    assert "Invalid Gregorian date" in err


def test_unknown_calendar_reports_error(capsys):
    assert main(["add", "2024-01-31", "1", "d", "--calendar", "mayan"]) == 2
    assert "Calendar mayan not found" in capsys.readouterr().err


def test_pretty_month(capsys):
    assert main(["pretty-month", "--calendar", "ummalqura", "--month", "1440", "9"]) == 0
    out = capsys.readouterr().out
    assert "Umm al-Qura  Ramadan 1440" in out
    assert "05-15" in out


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "50"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_negative_year_dates(capsys):
    assert main(["add", "-1-12-31", "1", "d"]) == 0
    assert capsys.readouterr().out.strip() == "0001-01-01"
    assert main(["-44-03-15", "--attr", "year"]) == 0
    out = capsys.readouterr().out
    assert "date: -0044-03-15" in out
    assert "epoch: BCE" in out


def test_negative_offset(capsys):
    assert main(["add", "2024-03-31", "-1", "m"]) == 0
    assert capsys.readouterr().out.strip() == "2024-02-29"


def test_shorthand_after_verbose_flag(capsys):
    assert main(["-v", "-44-03-15", "--attr", "year"]) == 0
    assert "date: -0044-03-15" in capsys.readouterr().out
    assert main(["--verbose", "2019-05-15"]) == 0
    assert "date: 2019-05-15" in capsys.readouterr().out
