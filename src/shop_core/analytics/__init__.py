"""Time-windowed analytics for sales and orders.

This module turns raw sale and order events into fixed-granularity series:

- **resolve_range**: inclusive window for a granularity anchored at "now"
- **generate_periods**: ordered periods that tile the window
- **assign_period**: period containing a timestamp
- **aggregate_sales / aggregate_orders**: per-period running totals
- **compute_series**: the whole pipeline, returning a SeriesResult

Example:
    >>> from datetime import datetime
    >>> from shop_core.analytics import SaleEvent, compute_series
    >>>
    >>> sales = [SaleEvent(datetime(2025, 1, 14, 10), 100, "Online")]
    >>> result = compute_series("weekly", "weekly", datetime(2025, 1, 17), sales, [])
    >>> result.sales_series[2]
    {'label': '01/14/2025', 'total': 100.0, 'online': 100.0, 'on_store': 0.0}
"""

from shop_core.analytics.aggregate import (
    aggregate_orders,
    aggregate_sales,
    classify_channel,
    classify_status,
)
from shop_core.analytics.api import compute_series
from shop_core.analytics.buckets import assign_period
from shop_core.analytics.periods import generate_periods
from shop_core.analytics.ranges import resolve_range
from shop_core.analytics.types import (
    Channel,
    Granularity,
    OrderEvent,
    Period,
    SaleEvent,
    SeriesResult,
    StatusCategory,
    TimeRange,
)

__all__ = [
    "Channel",
    "Granularity",
    "OrderEvent",
    "Period",
    "SaleEvent",
    "SeriesResult",
    "StatusCategory",
    "TimeRange",
    "aggregate_orders",
    "aggregate_sales",
    "assign_period",
    "classify_channel",
    "classify_status",
    "compute_series",
    "generate_periods",
    "resolve_range",
]
