from __future__ import annotations

import argparse
import random
from datetime import date
from typing import List, Tuple

import multical
from multical.core.time import jdn_to_jd, jdn_to_ymd, to_jdn

# Default sweep for calendars without a tabulated range: 1600-01-01 .. 2400-12-31
_DEFAULT_SPAN = (2305447.5, 2598007.5)


def parse_calendars(s: str) -> List[str]:
    # "gregorian,ummalqura" -> ["gregorian", "ummalqura"]
    return [x.strip() for x in s.split(",") if x.strip()]


def jd_span(name: str) -> Tuple[float, float]:
    bounds = multical.instance(name).rules.jd_bounds
    return bounds if bounds is not None else _DEFAULT_SPAN


def roundtrip_test(name: str, N: int, seed: int, *, max_failures: int) -> int:
    """JD -> date -> JD, and date -> JD -> date, for N random days."""
    random.seed(seed)
    cal = multical.instance(name)
    lo, hi = jd_span(name)
    failures = 0

    for _ in range(N):
        jd0 = lo + random.randint(0, int(hi - lo) - 1)
        d = cal.from_jd(jd0)
        jd1 = d.to_jd()
        back = cal.from_jd(jd1)
        if jd1 != jd0 or back != d:
            failures += 1
            print("\nFAIL")
            print("calendar:", name)
            print("jd0:", jd0)
            print("date:", d)
            print("jd1:", jd1)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def gregorian_crosscheck(N: int, seed: int, *, max_failures: int) -> int:
    """
    Meeus engine vs the independent Fliegel-Van Flandern JDN helpers, for
    N random days from JDN 0 (4714 BCE) to 9999-12-31, both directions.
    """
    random.seed(seed)
    greg = multical.instance("gregorian")
    last = to_jdn(date(9999, 12, 31))
    failures = 0

    for _ in range(N):
        jdn = random.randint(0, last)
        y, m, d = jdn_to_ymd(jdn)
        civil = (y if y > 0 else y - 1, m, d)
        jd = greg.to_jd(*civil)
        back = greg.from_jd(jdn_to_jd(jdn)).ymd()
        if jd != jdn_to_jd(jdn) or back != civil:
            failures += 1
            print("\nFAIL (gregorian cross-check)")
            print("jdn:", jdn)
            print("fliegel date:", civil)
            print("meeus jd:", jd)
            print("meeus date:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JD -> date -> JD.")
    p.add_argument("--calendars", type=str, default="gregorian,ummalqura",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total_fail = 0
    for name in parse_calendars(args.calendars):
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(name, N=args.N, seed=args.seed, max_failures=args.max_failures)

    print("Cross-checking gregorian against Fliegel-Van Flandern ...")
    total_fail += gregorian_crosscheck(N=args.N, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
