"""Shared fixtures for shop-core tests.

The reference week is Sunday 2025-01-12 through Saturday 2025-01-18, and
"now" is Friday 2025-01-17 at noon.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

import pandas as pd
import pytest

from shop_core.analytics.types import Period, TimeRange

FRIDAY_NOON = datetime(2025, 1, 17, 12, 0)
SUNDAY = datetime(2025, 1, 12)
TUESDAY = datetime(2025, 1, 14)
THURSDAY = datetime(2025, 1, 16)


@pytest.fixture
def now() -> datetime:
    """Reference instant: Friday 2025-01-17 12:00."""
    return FRIDAY_NOON


@pytest.fixture
def assert_tiles() -> Callable[[list[Period], TimeRange], None]:
    """Return a checker that periods cover a range with no gap or overlap."""

    def check(periods: list[Period], time_range: TimeRange) -> None:
        assert periods, "Expected at least one period"
        assert periods[0].start == time_range.start
        assert periods[-1].end == time_range.end
        for i, (prev, nxt) in enumerate(zip(periods, periods[1:])):
            assert prev.index == i
            assert prev.end + timedelta(microseconds=1) == nxt.start, (
                f"Gap or overlap between period {prev.index} and {nxt.index}"
            )

    return check


@pytest.fixture
def sales_csv(tmp_path: Path) -> Path:
    """Write a small ``sales`` export (one row has no date)."""
    path = tmp_path / "sales.csv"
    pd.DataFrame(
        {
            "id": [1, 2, 3, 4],
            "total": ["100", "abc", "20", "75"],
            "date": [
                "2025-01-14T10:00:00",
                "2025-01-15T10:00:00",
                None,
                "2025-01-18T23:59:59",
            ],
            "sold_by": ["Online", "On Store", "Online", "Walk-in"],
        }
    ).to_csv(path, index=False)
    return path


@pytest.fixture
def orders_csv(tmp_path: Path) -> Path:
    """Write a small ``orders`` export."""
    path = tmp_path / "orders.csv"
    pd.DataFrame(
        {
            "id": [10, 11, 12],
            "created_at": [
                "2025-01-16T08:30:00",
                "2025-01-16T09:00:00",
                "2025-01-13T18:00:00",
            ],
            "status": ["Paid", "Refunded", "Pending"],
        }
    ).to_csv(path, index=False)
    return path
