"""Series building: turn finished buckets into chronological chart records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shop_core.analytics.types import Channel, OrdersBucket, SalesBucket, StatusCategory


def build_sales_series(buckets: Mapping[int, SalesBucket]) -> list[dict[str, Any]]:
    """Return one record per sales bucket, ordered by period start.

    Each record has ``label``, ``total``, ``online`` and ``on_store``. Period
    bounds and indices are not included.
    """
    ordered = sorted(buckets.values(), key=lambda b: b.period.start)
    return [
        {
            "label": b.period.label,
            "total": b.total_amount,
            "online": b.channel_amounts[Channel.ONLINE],
            "on_store": b.channel_amounts[Channel.ON_STORE],
        }
        for b in ordered
    ]


def build_orders_series(buckets: Mapping[int, OrdersBucket]) -> list[dict[str, Any]]:
    """Return one record per orders bucket, ordered by period start.

    Each record has ``label`` plus one count per status category
    (``pending``, ``paid_to_ship``, ``to_receive``, ``completed``,
    ``cancelled``).
    """
    ordered = sorted(buckets.values(), key=lambda b: b.period.start)
    series = []
    for b in ordered:
        record: dict[str, Any] = {"label": b.period.label}
        for category in StatusCategory:
            record[category.value] = b.status_counts[category]
        series.append(record)
    return series
