#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import multical


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "multical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "multical[diagnostics]"') from e


def month_length_matrix(np, calendar: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Years, and a (years x months) array of month lengths."""
    cal = multical.instance(calendar)
    years = np.arange(start_year, end_year + 1, dtype=int)
    n_months = max(cal.months_in_year(int(y)) for y in years)
    Z = np.zeros((len(years), n_months), dtype=int)
    for i, y in enumerate(years):
        for k in range(cal.months_in_year(int(y))):
            m = cal.from_month_of_year(int(y), cal.min_month + k)
            Z[i, k] = cal.days_in_month(int(y), m)
    return years, Z


def year_length_counts(np, Z: "np.ndarray") -> dict[int, int]:
    lengths, counts = np.unique(Z.sum(axis=1), return_counts=True)
    return {int(n): int(c) for n, c in zip(lengths, counts)}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Month-length map and year-length histogram of a calendar.")
    p.add_argument("--calendar", default="ummalqura")
    p.add_argument("--start-year", type=int, default=1276)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--out", default="month_lengths.png")
    p.add_argument("--title", default=None)
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years, Z = month_length_matrix(np, args.calendar, args.start_year, args.end_year)
    counts = year_length_counts(np, Z)
    for n, c in sorted(counts.items()):
        print(f"{n} days: {c} years")

    cal = multical.instance(args.calendar)
    fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(14, 4.2), gridspec_kw={"width_ratios": [4, 1]})

    ax0.pcolormesh(
        np.arange(years[0] - 0.5, years[-1] + 1.5, 1.0),
        np.arange(0.5, Z.shape[1] + 1.0, 1.0),
        Z.T,
        shading="flat",
        cmap="Greys",
        vmin=Z.min() - 1,
        vmax=Z.max(),
    )
    ax0.set_xlabel(f"{cal.local.name} year")
    ax0.set_ylabel("Month of year")
    ax0.set_yticks(range(1, Z.shape[1] + 1))
    ax0.tick_params(axis="both", which="both", length=0)

    xs = sorted(counts)
    ax1.bar([str(x) for x in xs], [counts[x] for x in xs], color="0.35")
    ax1.set_xlabel("Days in year")
    ax1.set_ylabel("Years")

    fig.suptitle(args.title or f"{cal.local.name}: month lengths {args.start_year}-{args.end_year}")
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
