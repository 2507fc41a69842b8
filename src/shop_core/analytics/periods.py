"""Period generation: tile a reporting window into ordered buckets.

Given a TimeRange and its granularity this module produces the disjoint,
contiguous sub-periods a series is reported over:

- daily: one period equal to the whole window
- weekly: one period per civil day (7)
- monthly: one period per civil day of the month (28-31)
- yearly: one period per calendar month (12)

Consecutive periods are one microsecond apart (``periods[i].end + 1us ==
periods[i + 1].start``), so the first period starts at ``range.start``, the
last ends at ``range.end`` and there is no gap or overlap in between.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date, timedelta

from shop_core.analytics.labels import format_day_label, format_month_label
from shop_core.analytics.ranges import days_in_month, end_of_day, start_of_day
from shop_core.analytics.types import Granularity, Period, TimeRange

logger = logging.getLogger(__name__)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every civil day from ``start`` to ``end`` inclusive."""
    cur = start
    while cur <= end:
        yield cur
        cur += timedelta(days=1)


def iter_month_starts(start: date, end: date) -> Iterator[date]:
    """Yield the first day of every month from ``start``'s month to ``end``'s month."""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield date(year, month, 1)
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def _day_periods(time_range: TimeRange) -> list[Period]:
    return [
        Period(
            index=i,
            label=format_day_label(day),
            start=start_of_day(day),
            end=end_of_day(day),
        )
        for i, day in enumerate(iter_days(time_range.start.date(), time_range.end.date()))
    ]


def _month_periods(time_range: TimeRange) -> list[Period]:
    periods = []
    for i, first in enumerate(iter_month_starts(time_range.start.date(), time_range.end.date())):
        last = first.replace(day=days_in_month(first.year, first.month))
        periods.append(
            Period(
                index=i,
                label=format_month_label(first),
                start=start_of_day(first),
                end=end_of_day(last),
            )
        )
    return periods


def generate_periods(time_range: TimeRange, granularity: Granularity | str) -> list[Period]:
    """Produce the ordered periods that tile ``time_range``.

    Args:
        time_range: Window produced by ``resolve_range`` for the same granularity.
        granularity: Daily, weekly, monthly or yearly.

    Returns:
        Periods in chronological order, indexed from 0.

    Raises:
        ConfigError: If the granularity is unknown.

    Examples:
        >>> from datetime import datetime
        >>> from shop_core.analytics.ranges import resolve_range
        >>> r = resolve_range("monthly", datetime(2024, 2, 10))
        >>> len(generate_periods(r, "monthly"))
        29
    """
    granularity = Granularity.parse(granularity)

    if granularity is Granularity.DAILY:
        periods = [
            Period(
                index=0,
                label=format_day_label(time_range.start.date()),
                start=time_range.start,
                end=time_range.end,
            )
        ]
    elif granularity is Granularity.YEARLY:
        periods = _month_periods(time_range)
    else:
        periods = _day_periods(time_range)

    logger.debug(
        "Generated %d %s period(s) for %s to %s",
        len(periods),
        granularity.value,
        time_range.start,
        time_range.end,
    )
    return periods
