"""Tests for reporting window resolution."""

from datetime import date, datetime

import pytest

from shop_core.analytics.ranges import (
    days_in_month,
    end_of_day,
    resolve_range,
    start_of_day,
    start_of_week,
)
from shop_core.analytics.types import Granularity, TimeRange
from shop_core.exceptions import ConfigError


def test_daily_range_covers_reference_day(now: datetime) -> None:
    """Daily window runs from midnight to the last microsecond of the day."""
    r = resolve_range("daily", now)
    assert r.start == datetime(2025, 1, 17, 0, 0, 0)
    assert r.end == datetime(2025, 1, 17, 23, 59, 59, 999999)


def test_weekly_range_starts_on_sunday(now: datetime) -> None:
    """Friday 2025-01-17 belongs to the week Sunday 01-12 .. Saturday 01-18."""
    r = resolve_range(Granularity.WEEKLY, now)
    assert r.start == datetime(2025, 1, 12)
    assert r.end == datetime(2025, 1, 18, 23, 59, 59, 999999)


@pytest.mark.parametrize(
    "reference",
    [datetime(2025, 1, 12, 0, 0), datetime(2025, 1, 18, 23, 59, 59)],
)
def test_weekly_range_at_week_edges(reference: datetime) -> None:
    """Sunday and Saturday resolve to their own week."""
    r = resolve_range("weekly", reference)
    assert r.start == datetime(2025, 1, 12)
    assert r.end.date() == date(2025, 1, 18)


def test_weekly_range_crosses_year_boundary() -> None:
    """Wednesday 2025-01-01 sits in the week starting Sunday 2024-12-29."""
    r = resolve_range("weekly", datetime(2025, 1, 1, 9, 0))
    assert r.start == datetime(2024, 12, 29)
    assert r.end.date() == date(2025, 1, 4)


@pytest.mark.parametrize(
    ("reference", "last_day"),
    [
        (datetime(2024, 2, 10), date(2024, 2, 29)),
        (datetime(2025, 2, 10), date(2025, 2, 28)),
        (datetime(2025, 4, 30, 23), date(2025, 4, 30)),
        (datetime(2025, 12, 1), date(2025, 12, 31)),
    ],
)
def test_monthly_range_ends_on_last_day(reference: datetime, last_day: date) -> None:
    """Monthly window spans day 1 to the month's last day (leap aware)."""
    r = resolve_range("monthly", reference)
    assert r.start == datetime(reference.year, reference.month, 1)
    assert r.end == end_of_day(last_day)


def test_yearly_range(now: datetime) -> None:
    r = resolve_range("yearly", now)
    assert r.start == datetime(2025, 1, 1)
    assert r.end == datetime(2025, 12, 31, 23, 59, 59, 999999)


def test_resolve_range_is_deterministic(now: datetime) -> None:
    for g in Granularity:
        assert resolve_range(g, now) == resolve_range(g, now)


def test_unknown_granularity_raises() -> None:
    with pytest.raises(ConfigError):
        resolve_range("hourly", datetime(2025, 1, 1))


def test_granularity_parse_is_case_insensitive() -> None:
    assert Granularity.parse(" WEEKLY ") is Granularity.WEEKLY
    assert Granularity.parse(Granularity.YEARLY) is Granularity.YEARLY


def test_time_range_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        TimeRange(datetime(2025, 1, 2), datetime(2025, 1, 1))


def test_day_helpers() -> None:
    assert start_of_day(datetime(2025, 3, 9, 18, 45)) == datetime(2025, 3, 9)
    assert end_of_day(date(2025, 3, 9)) == datetime(2025, 3, 9, 23, 59, 59, 999999)
    assert start_of_week(date(2025, 1, 17)) == date(2025, 1, 12)
    assert start_of_week(date(2025, 1, 12)) == date(2025, 1, 12)
    assert days_in_month(2024, 2) == 29
    assert days_in_month(1900, 2) == 28
    assert days_in_month(2000, 2) == 29
