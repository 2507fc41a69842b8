"""Fold sale and order events into per-period buckets.

Sales and orders are aggregated independently, each over its own period
layout. Buckets are keyed by period index so two periods that happen to
share a display label can never be merged.

Classification rules (labels are trimmed, then matched case-sensitively):

- Sale channel: "Online" and "On Store" get their own running sum. Any other
  channel (including a missing one) still adds to the bucket total.
- Order status: Pending, Paid/To Ship, To Receive, Completed and Cancelled map
  to the five status categories. Any other status is dropped and counted
  nowhere.

Events whose timestamp is not a naive ``datetime`` are skipped with a
warning; the rest of the batch is still aggregated.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from shop_core.analytics.buckets import PeriodIndex
from shop_core.analytics.types import (
    Channel,
    OrderEvent,
    OrdersBucket,
    Period,
    SaleEvent,
    SalesBucket,
    StatusCategory,
)
from shop_core.exceptions import UnclassifiedCategoryError

logger = logging.getLogger(__name__)

CHANNEL_LABELS: dict[str, Channel] = {
    "Online": Channel.ONLINE,
    "On Store": Channel.ON_STORE,
    "OnStore": Channel.ON_STORE,
}

STATUS_LABELS: dict[str, StatusCategory] = {
    "Pending": StatusCategory.PENDING,
    "Paid": StatusCategory.PAID_TO_SHIP,
    "To Ship": StatusCategory.PAID_TO_SHIP,
    "ToShip": StatusCategory.PAID_TO_SHIP,
    "To Receive": StatusCategory.TO_RECEIVE,
    "ToReceive": StatusCategory.TO_RECEIVE,
    "Completed": StatusCategory.COMPLETED,
    "Cancelled": StatusCategory.CANCELLED,
}


def normalize_label(label: Any) -> str:
    """Trim a free-form label to its lookup key (" On Store " -> "On Store")."""
    if label is None:
        return ""
    return str(label).strip()


def classify_channel(label: Any, strict: bool = False) -> Channel:
    """Return the channel a "sold by" label belongs to.

    Args:
        label: Raw channel label.
        strict: Raise instead of returning Channel.OTHER for unknown labels.

    Raises:
        UnclassifiedCategoryError: If ``strict`` and the label is unknown.
    """
    if isinstance(label, Channel):
        return label
    channel = CHANNEL_LABELS.get(normalize_label(label))
    if channel is not None:
        return channel
    if strict:
        raise UnclassifiedCategoryError(f"Unknown sale channel: {label!r}")
    return Channel.OTHER


def classify_status(label: Any, strict: bool = False) -> StatusCategory | None:
    """Return the status category for an order status, or None if unknown.

    Raises:
        UnclassifiedCategoryError: If ``strict`` and the status is unknown.
    """
    category = STATUS_LABELS.get(normalize_label(label))
    if category is None and strict:
        raise UnclassifiedCategoryError(f"Unknown order status: {label!r}")
    return category


def is_bucketable(timestamp: Any) -> bool:
    """Return True if ``timestamp`` is a naive datetime comparable with period bounds."""
    return isinstance(timestamp, datetime) and timestamp.tzinfo is None


def coerce_amount(value: Any) -> float:
    """Convert a sale amount to float; non-numeric or non-finite values become 0.0."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def aggregate_sales(
    events: Iterable[SaleEvent],
    periods: Sequence[Period],
) -> dict[int, SalesBucket]:
    """Accumulate sale totals per period.

    Args:
        events: Sale events in any order.
        periods: Ordered periods from ``generate_periods``.

    Returns:
        Dict mapping period index to its SalesBucket. Every period has a
        bucket, even when no event landed in it.
    """
    index = PeriodIndex(periods)
    buckets = {p.index: SalesBucket(period=p) for p in index.periods}
    skipped = 0
    malformed = 0

    for event in events:
        if not is_bucketable(event.timestamp):
            malformed += 1
            continue
        period = index.find(event.timestamp)
        if period is None:
            skipped += 1
            continue

        bucket = buckets[period.index]
        amount = coerce_amount(event.amount)
        bucket.total_amount += amount

        channel = classify_channel(event.channel)
        if channel is not Channel.OTHER:
            bucket.channel_amounts[channel] += amount

    if malformed:
        logger.warning(
            "Skipped %d sale event(s) without a naive datetime timestamp", malformed
        )
    if skipped:
        logger.debug("Skipped %d sale event(s) outside the reporting window", skipped)
    return buckets


def aggregate_orders(
    events: Iterable[OrderEvent],
    periods: Sequence[Period],
) -> dict[int, OrdersBucket]:
    """Count orders per period and status category.

    Orders outside the window and orders with an unrecognized status are
    dropped.

    Args:
        events: Order events in any order.
        periods: Ordered periods from ``generate_periods``.

    Returns:
        Dict mapping period index to its OrdersBucket.
    """
    index = PeriodIndex(periods)
    buckets = {p.index: OrdersBucket(period=p) for p in index.periods}
    skipped = 0
    unclassified = 0
    malformed = 0

    for event in events:
        if not is_bucketable(event.timestamp):
            malformed += 1
            continue
        period = index.find(event.timestamp)
        if period is None:
            skipped += 1
            continue

        category = classify_status(event.status)
        if category is None:
            unclassified += 1
            continue
        buckets[period.index].status_counts[category] += 1

    if malformed:
        logger.warning(
            "Skipped %d order event(s) without a naive datetime timestamp", malformed
        )
    if skipped:
        logger.debug("Skipped %d order event(s) outside the reporting window", skipped)
    if unclassified:
        logger.debug("Dropped %d order event(s) with an unrecognized status", unclassified)
    return buckets
