"""Tests for period generation."""

from datetime import datetime

import pytest

from shop_core.analytics.periods import generate_periods
from shop_core.analytics.ranges import resolve_range


def test_daily_has_one_period_equal_to_range(now, assert_tiles) -> None:
    r = resolve_range("daily", now)
    periods = generate_periods(r, "daily")

    assert len(periods) == 1
    assert periods[0].start == datetime(2025, 1, 17, 0, 0, 0)
    assert periods[0].end == datetime(2025, 1, 17, 23, 59, 59, 999999)
    assert periods[0].label == "01/17/2025"
    assert_tiles(periods, r)


def test_weekly_has_seven_consecutive_days(now, assert_tiles) -> None:
    """Seven day periods from Sunday to Saturday."""
    r = resolve_range("weekly", now)
    periods = generate_periods(r, "weekly")

    assert len(periods) == 7
    assert [p.start.day for p in periods] == [12, 13, 14, 15, 16, 17, 18]
    assert periods[0].start.weekday() == 6  # Sunday
    assert [p.label for p in periods][:3] == ["01/12/2025", "01/13/2025", "01/14/2025"]
    assert_tiles(periods, r)


def test_weekly_across_month_boundary(assert_tiles) -> None:
    r = resolve_range("weekly", datetime(2025, 3, 1))  # Saturday
    periods = generate_periods(r, "weekly")

    assert len(periods) == 7
    assert periods[0].label == "02/23/2025"
    assert periods[-1].label == "03/01/2025"
    assert_tiles(periods, r)


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        (datetime(2025, 2, 14), 28),
        (datetime(2024, 2, 14), 29),
        (datetime(2025, 6, 14), 30),
        (datetime(2025, 1, 14), 31),
    ],
)
def test_monthly_has_one_period_per_day(reference, expected, assert_tiles) -> None:
    r = resolve_range("monthly", reference)
    periods = generate_periods(r, "monthly")

    assert len(periods) == expected
    assert periods[0].start.day == 1
    assert periods[-1].start.day == expected
    assert_tiles(periods, r)


def test_yearly_has_twelve_month_periods(assert_tiles) -> None:
    r = resolve_range("yearly", datetime(2024, 7, 4))
    periods = generate_periods(r, "yearly")

    assert len(periods) == 12
    assert [p.label for p in periods] == [
        "Jan 2024", "Feb 2024", "Mar 2024", "Apr 2024", "May 2024", "Jun 2024",
        "Jul 2024", "Aug 2024", "Sep 2024", "Oct 2024", "Nov 2024", "Dec 2024",
    ]
    feb = periods[1]
    assert feb.start == datetime(2024, 2, 1)
    assert feb.end == datetime(2024, 2, 29, 23, 59, 59, 999999)
    assert_tiles(periods, r)


@pytest.mark.parametrize("granularity", ["daily", "weekly", "monthly", "yearly"])
def test_labels_are_unique_and_indices_sequential(now, granularity) -> None:
    periods = generate_periods(resolve_range(granularity, now), granularity)

    labels = [p.label for p in periods]
    assert len(set(labels)) == len(labels)
    assert [p.index for p in periods] == list(range(len(periods)))
