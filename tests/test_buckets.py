"""Tests for bucket assignment."""

from datetime import datetime, timedelta

from shop_core.analytics.buckets import PeriodIndex, assign_period
from shop_core.analytics.periods import generate_periods
from shop_core.analytics.ranges import resolve_range


def _week(now: datetime):
    return generate_periods(resolve_range("weekly", now), "weekly")


def test_timestamp_inside_day_is_assigned(now) -> None:
    periods = _week(now)
    period = assign_period(datetime(2025, 1, 14, 13, 5), periods)
    assert period is not None
    assert period.index == 2
    assert period.label == "01/14/2025"


def test_bounds_are_inclusive(now) -> None:
    """The first and last instant of a day both belong to that day."""
    periods = _week(now)
    tuesday = periods[2]

    assert assign_period(tuesday.start, periods) is tuesday
    assert assign_period(tuesday.end, periods) is tuesday
    assert assign_period(tuesday.end + timedelta(microseconds=1), periods) is periods[3]


def test_outside_window_is_unassigned(now) -> None:
    periods = _week(now)

    assert assign_period(periods[0].start - timedelta(microseconds=1), periods) is None
    assert assign_period(periods[-1].end + timedelta(microseconds=1), periods) is None
    assert assign_period(datetime(2030, 1, 1), periods) is None


def test_empty_period_list() -> None:
    assert assign_period(datetime(2025, 1, 1), []) is None


def test_period_index_matches_linear_scan(now) -> None:
    """Bisection gives the same answer as checking every period."""
    periods = generate_periods(resolve_range("yearly", now), "yearly")
    index = PeriodIndex(periods)
    probes = [
        datetime(2024, 12, 31, 23, 59, 59, 999999),
        datetime(2025, 1, 1),
        datetime(2025, 2, 28, 23, 59, 59, 999999),
        datetime(2025, 3, 1),
        datetime(2025, 7, 15, 12),
        datetime(2025, 12, 31, 23, 59, 59, 999999),
        datetime(2026, 1, 1),
    ]
    for ts in probes:
        linear = next((p for p in periods if p.start <= ts <= p.end), None)
        assert index.find(ts) is linear
    assert len(index) == 12
