from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    m = _DATE_RE.match(s)
    if m is None:
        raise argparse.ArgumentTypeError(f"expected [-]Y-M-D, got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _pop_date(argv: list[str]) -> tuple[tuple[int, int, int] | None, list[str]]:
    """
    Remove the first [-]Y-M-D token from argv. argparse reads a leading '-'
    as an option flag, so dates with negative years cannot pass through it.
    """
    for i, a in enumerate(argv):
        if _DATE_RE.match(a):
            return _parse_ymd(a), argv[:i] + argv[i + 1:]
    return None, argv


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_info(argv: list[str]) -> int:
    import multical

    ymd, argv = _pop_date(argv)
    p = argparse.ArgumentParser(prog="multical info", usage="%(prog)s [-]Y-M-D [options]",
                                description="Describe one date (given in the chosen calendar)")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--language", default="")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)
    if ymd is None:
        p.error("expected a [-]Y-M-D date")

    d = multical.new_date(*ymd, calendar=args.calendar, language=args.language)
    info = multical.date_info(d, attributes=tuple(args.attr))
    for k, v in info.items():
        print(f"{k}: {v}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import multical

    ymd, argv = _pop_date(argv)
    p = argparse.ArgumentParser(prog="multical convert", usage="%(prog)s [-]Y-M-D [options]",
                                description="Convert a date (given in the source calendar) between calendars")
    p.add_argument("--from", dest="source", default="gregorian")
    p.add_argument("--to", dest="target", default="ummalqura")
    p.add_argument("--language", default="", help="Locale of the target calendar")
    args = p.parse_args(argv)
    if ymd is None:
        p.error("expected a [-]Y-M-D date")

    d = multical.new_date(*ymd, calendar=args.source)
    out = multical.convert(d, args.target, args.language)
    cal = out.calendar
    print(f"{d} ({d.calendar.local.name}) -> {out} ({cal.local.name})")
    print(f"  {cal.localise_digits(out.day)} {cal.month_name(out)} {cal.localise_digits(abs(out.year))} {out.epoch()}")
    return 0


def cmd_add(argv: list[str]) -> int:
    import multical

    ymd, argv = _pop_date(argv)
    p = argparse.ArgumentParser(prog="multical add", usage="%(prog)s [-]Y-M-D offset period [options]",
                                description="Add years, months, weeks or days to a date")
    p.add_argument("offset", type=int)
    p.add_argument("period", help="y|m|w|d (or year, month, week, day)")
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)
    if ymd is None:
        p.error("expected a [-]Y-M-D date")

    d = multical.new_date(*ymd, calendar=args.calendar)
    print(d.add(args.offset, args.period))
    return 0


def cmd_list(argv: list[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical list", description="List registered calendars")
    p.add_argument("--attributes", action="store_true", help="List the --attr names instead")
    args = p.parse_args(argv)
    from multical.attributes.registry import available_attributes, describe_attribute
    from multical.engines.specs import ALL_SPECS

    if args.attributes:
        for name in available_attributes():
            print(f"{name:12s} {describe_attribute(name)}".rstrip())
        return 0

    for name in multical.list_calendars():
        spec = ALL_SPECS.get(name)
        print(f"{name:12s} {spec.description if spec else ''}".rstrip())
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `multical [-v] Y-M-D ...`
    i = 0
    while i < len(argv) and argv[i] in ("-v", "--verbose"):
        i += 1
    if i < len(argv) and _DATE_RE.match(argv[i]):
        argv = argv[:i] + ["info"] + argv[i:]

    p = argparse.ArgumentParser(prog="multical", description="Multi-calendar date toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List registered calendars")
    sub.add_parser("info", help="Describe one date")
    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("add", help="Date arithmetic")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month grid paired with a second calendar")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "month-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from multical.core.errors import CalendarError

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "convert": cmd_convert,
        "add": cmd_add,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "pretty-month":
            return _run_module_main("multical.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "multical.diagnostics.round_trip",
                "month-lengths": "multical.diagnostics.month_lengths",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalendarError as e:
        print(f"multical: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
