"""Bucket assignment: map an event timestamp to the period containing it."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from datetime import datetime

from shop_core.analytics.types import Period


def assign_period(timestamp: datetime, periods: Sequence[Period]) -> Period | None:
    """Return the period whose inclusive ``[start, end]`` contains ``timestamp``.

    ``periods`` must be in chronological order (as produced by
    ``generate_periods``). The lookup bisects on period starts and then
    checks the candidate's end, which gives the same answer as scanning
    every period.

    Args:
        timestamp: Civil-local event time.
        periods: Ordered, non-overlapping periods.

    Returns:
        The containing period, or None when the timestamp is outside every period.
    """
    return PeriodIndex(periods).find(timestamp)


class PeriodIndex:
    """Reusable lookup over one period sequence.

    Keeps the sorted start list so a batch of events does not rebuild it per
    lookup.
    """

    def __init__(self, periods: Sequence[Period]):
        self.periods = list(periods)
        self._starts = [p.start for p in self.periods]

    def __len__(self) -> int:
        return len(self.periods)

    def find(self, timestamp: datetime) -> Period | None:
        pos = bisect.bisect_right(self._starts, timestamp) - 1
        if pos < 0:
            return None
        candidate = self.periods[pos]
        return candidate if candidate.contains(timestamp) else None
