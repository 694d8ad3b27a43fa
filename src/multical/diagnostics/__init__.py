"""Command line checks and views over the registered calendars.

- round_trip: JD round trips per calendar, Gregorian cross-check (stdlib only)
- pretty_month: text month grid paired with a second calendar (stdlib only)
- month_lengths: month-length map and year-length histogram (needs the
  diagnostics extra: numpy, matplotlib)
"""

__all__ = ["round_trip", "pretty_month", "month_lengths"]
