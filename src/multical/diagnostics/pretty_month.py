from __future__ import annotations

import argparse

import multical


def dow_header(calendar: str, language: str = "") -> str:
    cal = multical.instance(calendar, language)
    names = cal.local.day_names_min
    first = cal.local.first_day
    return " ".join(names[(first + i) % 7][:6].ljust(6) for i in range(7)).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk).rstrip())
        print(" ".join(c[1] for c in wk).rstrip())
    print()


def month_weeks(calendar: str, year: int, month: int, language: str = "",
                paired: str = "gregorian") -> list[list[tuple[str, str]]]:
    """Week rows of (local day, paired MM-DD) cells, starting on the locale's first day."""
    cal = multical.instance(calendar, language)
    other = multical.instance(paired)

    first = cal.new_date(year, month, cal.min_day)
    n_days = first.days_in_month()
    jd0 = first.to_jd()

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.day_of_week() - cal.local.first_day) % 7
    for _ in range(pad):
        wk.append(cell("", ""))
    for i in range(n_days):
        g = other.from_jd(jd0 + i)
        top = cal.localise_digits(cal.min_day + i).rjust(2)
        bot = f"{g.month:02d}-{g.day:02d}"
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def month_calendar(calendar: str, year: int, month: int, language: str = "", paired: str = "gregorian") -> None:
    cal = multical.instance(calendar, language)
    title = f"{cal.local.name}  {cal.month_name(year, month)} {cal.format_year(year)}"
    title += f"   ({multical.instance(paired).local.name} MM-DD below)"
    print_grid(title, dow_header(calendar, language), month_weeks(calendar, year, month, language, paired))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month of any calendar with the paired dates of a second calendar."
    )
    p.add_argument("--calendar", default="ummalqura", help="gregorian|ummalqura (default: ummalqura)")
    p.add_argument("--language", default="", help="Locale code, e.g. ar, zh-CN (default: English)")
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Month to print: Y M (e.g. 1440 9)")
    p.add_argument("--paired", default="gregorian", help="Calendar of the second label row (default: gregorian)")
    args = p.parse_args(argv)

    if not args.month:
        # sensible default demo
        today = multical.instance(args.calendar, args.language).today()
        month_calendar(args.calendar, today.year, today.month, args.language, args.paired)
        return 0

    Y, M = args.month
    month_calendar(args.calendar, Y, M, args.language, args.paired)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
