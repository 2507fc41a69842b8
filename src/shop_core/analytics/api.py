"""Public API for the analytics engine.

This module provides a clean, in-memory entry point that turns sale and
order events into chart-ready series:

- does NOT read or write any files,
- does NOT call the data service or read environment variables,
- MAY log progress via the logging module.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from shop_core.analytics.aggregate import aggregate_orders, aggregate_sales
from shop_core.analytics.periods import generate_periods
from shop_core.analytics.ranges import resolve_range
from shop_core.analytics.series import build_orders_series, build_sales_series
from shop_core.analytics.types import Granularity, OrderEvent, SaleEvent, SeriesResult

logger = logging.getLogger(__name__)


def compute_series(
    sales_granularity: Granularity | str,
    orders_granularity: Granularity | str,
    now: datetime,
    sales_events: Iterable[SaleEvent],
    order_events: Iterable[OrderEvent],
) -> SeriesResult:
    """Build the sales and orders series for the windows anchored at ``now``.

    The two streams are processed independently: each gets the window and
    periods of its own granularity and its own fresh bucket map. Calling
    this twice with the same arguments returns equal results.

    Args:
        sales_granularity: Resolution of the sales series.
        orders_granularity: Resolution of the orders series.
        now: Reference instant (naive civil-local datetime).
        sales_events: Sale events; out-of-window events contribute nothing.
        order_events: Order events; out-of-window or unrecognized-status
            events contribute nothing.

    Returns:
        SeriesResult with chronological ``sales_series`` and ``orders_series``.

    Raises:
        ConfigError: If either granularity is unknown.

    Examples:
        >>> from datetime import datetime
        >>> result = compute_series("weekly", "monthly", datetime(2025, 1, 17), [], [])
        >>> len(result.sales_series), result.sales_series[0]["label"]
        (7, '01/12/2025')
    """
    sales_granularity = Granularity.parse(sales_granularity)
    orders_granularity = Granularity.parse(orders_granularity)

    sales_range = resolve_range(sales_granularity, now)
    orders_range = resolve_range(orders_granularity, now)

    sales_periods = generate_periods(sales_range, sales_granularity)
    orders_periods = generate_periods(orders_range, orders_granularity)

    sales_buckets = aggregate_sales(sales_events, sales_periods)
    orders_buckets = aggregate_orders(order_events, orders_periods)

    logger.info(
        "Computed %s sales series (%d periods) and %s orders series (%d periods) at %s",
        sales_granularity.value,
        len(sales_periods),
        orders_granularity.value,
        len(orders_periods),
        now.isoformat(),
    )

    return SeriesResult(
        sales_series=build_sales_series(sales_buckets),
        orders_series=build_orders_series(orders_buckets),
        sales_range=sales_range,
        orders_range=orders_range,
    )
