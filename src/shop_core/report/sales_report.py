"""Sales report: per-line money columns and a summary over filtered sales.

Works on full ``sales`` rows (product, quantity, price, subtotal,
shipping_fee, cost, payment_method, sold_by, date). Per line:

- subtotal: the stored ``subtotal`` when positive, else ``quantity * price``
- total_sales: subtotal + shipping_fee
- profit: subtotal - cost

Missing or non-numeric numbers count as zero.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from shop_core.analytics.aggregate import classify_channel
from shop_core.analytics.ranges import resolve_range
from shop_core.analytics.types import Channel, Granularity
from shop_core.config import DEFAULT_TIMEZONE
from shop_core.exceptions import MalformedRecordError
from shop_core.sources.records import parse_timestamp

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "product_name",
    "quantity",
    "price",
    "subtotal",
    "shipping_fee",
    "total_sales",
    "profit",
    "payment_method",
    "sold_by",
    "date",
]


@dataclass
class SalesReport:
    """Result of ``build_sales_report``.

    Attributes:
        lines: One row per sale with the REPORT_COLUMNS, newest first.
        summary: ``line_count``, ``items_sold``, ``total_sales`` and ``total_profit``.
    """

    lines: pd.DataFrame
    summary: dict[str, float | int]

    def to_csv(self, path: str | Path) -> Path:
        """Write the report lines to ``path`` and return it."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.lines.to_csv(path, index=False, encoding="utf-8")
        logger.info("Wrote sales report with %d line(s) to %s", len(self.lines), path)
        return path


def _numeric(df: pd.DataFrame, column: str) -> pd.Series:
    if column not in df.columns:
        return pd.Series(0.0, index=df.index)
    return pd.to_numeric(df[column], errors="coerce").fillna(0.0).astype(float)


def _text(df: pd.DataFrame, column: str) -> pd.Series:
    if column not in df.columns:
        return pd.Series("", index=df.index)
    return df[column].fillna("").astype(str)


def _timestamp_or_none(value: Any, timezone: str) -> datetime | None:
    try:
        return parse_timestamp(value, timezone)
    except MalformedRecordError:
        return None


def build_sales_report(
    rows: pd.DataFrame | Iterable[Mapping[str, Any]],
    now: datetime | None = None,
    granularity: Granularity | str | None = None,
    channel: Channel | str | None = None,
    timezone: str = DEFAULT_TIMEZONE,
) -> SalesReport:
    """Filter sales and compute the per-line and summary money columns.

    Args:
        rows: Sale rows (DataFrame or iterable of mappings).
        now: Reference instant for the time filter; defaults to ``datetime.now()``.
        granularity: Keep only sales inside ``resolve_range(granularity, now)``.
            None keeps every sale, including ones with an unparseable date.
        channel: Keep only sales of this channel ("Online", "On Store" or
            Channel.OTHER). None keeps every channel.
        timezone: Civil timezone for aware timestamps.

    Returns:
        SalesReport with lines and summary.

    Raises:
        ConfigError: If the granularity is unknown.
        UnclassifiedCategoryError: If ``channel`` is a string that is not a
            known channel.
    """
    df = rows.copy() if isinstance(rows, pd.DataFrame) else pd.DataFrame(list(rows))
    df = df.reset_index(drop=True)

    if "date" in df.columns:
        raw_dates = df["date"]
    else:
        raw_dates = pd.Series(None, index=df.index, dtype=object)
    df["_ts"] = pd.Series(
        [_timestamp_or_none(v, timezone) for v in raw_dates],
        index=df.index,
        dtype="datetime64[ns]",
    )

    if channel is not None:
        wanted = channel if isinstance(channel, Channel) else classify_channel(channel, strict=True)
        channels = _text(df, "sold_by").map(lambda label: classify_channel(label).value)
        df = df[channels == wanted.value]

    if granularity is not None:
        window = resolve_range(granularity, now or datetime.now())
        in_window = df["_ts"].notna() & (df["_ts"] >= window.start) & (df["_ts"] <= window.end)
        df = df[in_window]
        logger.debug(
            "Time filter %s kept %d sale(s) between %s and %s",
            Granularity.parse(granularity).value,
            len(df),
            window.start,
            window.end,
        )

    quantity = _numeric(df, "quantity")
    price = _numeric(df, "price")
    stored_subtotal = _numeric(df, "subtotal")
    subtotal = pd.Series(
        np.where(stored_subtotal > 0, stored_subtotal, quantity * price), index=df.index
    )
    shipping = _numeric(df, "shipping_fee")
    cost = _numeric(df, "cost")

    lines = pd.DataFrame(
        {
            "product_name": _text(df, "product_name"),
            "quantity": quantity,
            "price": price,
            "subtotal": subtotal,
            "shipping_fee": shipping,
            "total_sales": subtotal + shipping,
            "profit": subtotal - cost,
            "payment_method": _text(df, "payment_method"),
            "sold_by": _text(df, "sold_by"),
            "date": df["_ts"],
        },
        columns=REPORT_COLUMNS,
    )
    # Newest first; rows without a date go last
    lines = lines.sort_values("date", ascending=False, na_position="last", kind="stable")
    lines = lines.reset_index(drop=True)

    summary = {
        "line_count": int(len(lines)),
        "items_sold": float(lines["quantity"].sum()),
        "total_sales": float(lines["total_sales"].sum()),
        "total_profit": float(lines["profit"].sum()),
    }
    logger.info(
        "Sales report: %d line(s), total sales %.2f, total profit %.2f",
        summary["line_count"],
        summary["total_sales"],
        summary["total_profit"],
    )
    return SalesReport(lines=lines, summary=summary)

