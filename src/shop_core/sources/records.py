"""Raw row parsing: turn data-service rows into sale and order events.

Rows are plain mappings as returned by the REST service or read from a CSV
export:

- sales: ``{"id", "total", "date", "sold_by"}`` (``created_at`` is used when
  ``date`` is missing)
- orders: ``{"id", "created_at", "status"}``

Timestamps with an offset are converted to the configured civil timezone and
made naive; naive timestamps are taken as already civil-local.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

import pandas as pd

from shop_core.analytics.types import OrderEvent, SaleEvent
from shop_core.config import DEFAULT_TIMEZONE
from shop_core.exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

SALE_TIMESTAMP_FIELDS = ("date", "created_at")
ORDER_TIMESTAMP_FIELDS = ("created_at",)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _first_present(row: Mapping[str, Any], fields: Iterable[str]) -> Any:
    for name in fields:
        value = row.get(name)
        if not _is_missing(value):
            return value
    return None


def _clean_label(value: Any) -> str | None:
    if _is_missing(value):
        return None
    return str(value).strip()


def parse_timestamp(value: Any, timezone: str = DEFAULT_TIMEZONE) -> datetime:
    """Parse a timestamp into a naive civil-local datetime.

    Args:
        value: ISO-8601 string, datetime or pandas Timestamp.
        timezone: Civil timezone aware values are converted into.

    Returns:
        Naive datetime in the civil timezone.

    Raises:
        MalformedRecordError: If the value is missing or cannot be parsed.

    Examples:
        >>> parse_timestamp("2025-01-14T02:00:00+00:00", "Asia/Manila")
        datetime.datetime(2025, 1, 14, 10, 0)
    """
    if _is_missing(value):
        raise MalformedRecordError("Missing timestamp")
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise MalformedRecordError(f"Unparseable timestamp {value!r}: {e}") from e
    if pd.isna(ts):
        raise MalformedRecordError(f"Unparseable timestamp {value!r}")

    if ts.tzinfo is not None:
        ts = ts.tz_convert(timezone).tz_localize(None)
    return ts.to_pydatetime()


def parse_sale_record(row: Mapping[str, Any], timezone: str = DEFAULT_TIMEZONE) -> SaleEvent:
    """Build a SaleEvent from one ``sales`` row.

    The amount is passed through untouched; the aggregator treats
    non-numeric amounts as zero.

    Raises:
        MalformedRecordError: If the row has no parseable timestamp.
    """
    raw_ts = _first_present(row, SALE_TIMESTAMP_FIELDS)
    return SaleEvent(
        timestamp=parse_timestamp(raw_ts, timezone),
        amount=row.get("total"),
        channel=_clean_label(row.get("sold_by")),
    )


def parse_order_record(row: Mapping[str, Any], timezone: str = DEFAULT_TIMEZONE) -> OrderEvent:
    """Build an OrderEvent from one ``orders`` row.

    Raises:
        MalformedRecordError: If the row has no parseable timestamp.
    """
    raw_ts = _first_present(row, ORDER_TIMESTAMP_FIELDS)
    return OrderEvent(
        timestamp=parse_timestamp(raw_ts, timezone),
        status=_clean_label(row.get("status")),
    )


def parse_sale_records(
    rows: Iterable[Mapping[str, Any]],
    timezone: str = DEFAULT_TIMEZONE,
) -> list[SaleEvent]:
    """Parse sale rows, skipping (and logging) malformed ones."""
    events = []
    for row in rows:
        try:
            events.append(parse_sale_record(row, timezone))
        except MalformedRecordError as e:
            logger.warning("Skipping sale record %s: %s", row.get("id", "?"), e)
    return events


def parse_order_records(
    rows: Iterable[Mapping[str, Any]],
    timezone: str = DEFAULT_TIMEZONE,
) -> list[OrderEvent]:
    """Parse order rows, skipping (and logging) malformed ones."""
    events = []
    for row in rows:
        try:
            events.append(parse_order_record(row, timezone))
        except MalformedRecordError as e:
            logger.warning("Skipping order record %s: %s", row.get("id", "?"), e)
    return events
