"""Reporting window resolution.

Turns a granularity and a reference instant ("now") into the inclusive
window a series covers. Weeks start on Sunday. End bounds are the last
representable instant of the civil day (microsecond resolution).
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta

from shop_core.analytics.types import Granularity, TimeRange


def start_of_day(d: date | datetime) -> datetime:
    """Return midnight of the civil day containing ``d``."""
    if isinstance(d, datetime):
        d = d.date()
    return datetime.combine(d, time.min)


def end_of_day(d: date | datetime) -> datetime:
    """Return the last instant (23:59:59.999999) of the civil day containing ``d``."""
    if isinstance(d, datetime):
        d = d.date()
    return datetime.combine(d, time.max)


def start_of_week(d: date | datetime) -> date:
    """Return the Sunday that starts the week containing ``d``.

    Examples:
        >>> start_of_week(date(2025, 1, 17))  # Friday
        datetime.date(2025, 1, 12)
    """
    if isinstance(d, datetime):
        d = d.date()
    # date.weekday(): Monday=0 .. Sunday=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month (leap-year aware)."""
    return calendar.monthrange(year, month)[1]


def resolve_range(granularity: Granularity | str, now: datetime) -> TimeRange:
    """Compute the inclusive reporting window for ``granularity`` anchored at ``now``.

    Args:
        granularity: Daily, weekly, monthly or yearly.
        now: Reference instant (naive civil-local datetime).

    Returns:
        TimeRange covering:
        - daily: the civil day of ``now``
        - weekly: Sunday through Saturday of ``now``'s week
        - monthly: day 1 through the last day of ``now``'s month
        - yearly: January 1 through December 31 of ``now``'s year

    Raises:
        ConfigError: If the granularity is unknown.
    """
    granularity = Granularity.parse(granularity)
    today = now.date()

    if granularity is Granularity.DAILY:
        return TimeRange(start_of_day(today), end_of_day(today))

    if granularity is Granularity.WEEKLY:
        first = start_of_week(today)
        return TimeRange(start_of_day(first), end_of_day(first + timedelta(days=6)))

    if granularity is Granularity.MONTHLY:
        first = today.replace(day=1)
        last = today.replace(day=days_in_month(today.year, today.month))
        return TimeRange(start_of_day(first), end_of_day(last))

    return TimeRange(
        start_of_day(date(today.year, 1, 1)),
        end_of_day(date(today.year, 12, 31)),
    )
