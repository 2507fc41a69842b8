"""shop-core - analytics engine for a small retail shop's operator dashboard.

This package turns raw sale and order records into fixed-granularity time
series for charting, plus a filtered sales report.

Module Structure:
    shop_core.analytics: Window resolution, period generation, aggregation
    shop_core.sources: REST and CSV readers for sale/order records
    shop_core.refresh: Concurrent fetch-and-aggregate cycle with superseding
    shop_core.report: Sales report (per-line totals, profit, summary)
    shop_core.config: ShopConfig (service URL, key, timezone)

Quick Start:
    >>> import asyncio
    >>> from shop_core import ShopConfig
    >>> from shop_core.refresh import SeriesRefresher
    >>> from shop_core.sources import RestClient, RestOrdersReader, RestSalesReader
    >>>
    >>> client = RestClient(ShopConfig.from_env())
    >>> refresher = SeriesRefresher(RestSalesReader(client), RestOrdersReader(client))
    >>> result = asyncio.run(refresher.refresh("weekly", "monthly"))
    >>> sales_df, orders_df = result.to_frames()

Series Reference:
    Sales records:  label, total, online, on_store
    Orders records: label, pending, paid_to_ship, to_receive, completed, cancelled
"""

__version__ = "0.1.0"

from shop_core.analytics import Granularity, SeriesResult, compute_series
from shop_core.config import ShopConfig
from shop_core.exceptions import (
    ConfigError,
    DataFetchError,
    MalformedRecordError,
    ShopCoreError,
    UnclassifiedCategoryError,
)

__all__ = [
    "ConfigError",
    "DataFetchError",
    "Granularity",
    "MalformedRecordError",
    "SeriesResult",
    "ShopConfig",
    "ShopCoreError",
    "UnclassifiedCategoryError",
    "__version__",
    "compute_series",
]
