"""Shared types for the analytics engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

import pandas as pd

from shop_core.exceptions import ConfigError


class Granularity(str, Enum):
    """Reporting resolution selected independently for each series."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: Granularity | str) -> Granularity:
        """Return the Granularity for an enum member or a case-insensitive name.

        Raises:
            ConfigError: If the value is not one of daily/weekly/monthly/yearly.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            valid = ", ".join(g.value for g in cls)
            raise ConfigError(f"Invalid granularity {value!r}. Must be one of: {valid}.") from e


class Channel(str, Enum):
    """Sale attribution channel."""

    ONLINE = "Online"
    ON_STORE = "On Store"
    OTHER = "Other"


class StatusCategory(str, Enum):
    """Order-lifecycle category an order status is counted under."""

    PENDING = "pending"
    PAID_TO_SHIP = "paid_to_ship"
    TO_RECEIVE = "to_receive"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TimeRange:
    """Inclusive reporting window.

    Attributes:
        start: First instant of the window (inclusive).
        end: Last instant of the window (inclusive).
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"TimeRange start {self.start} is after end {self.end}")

    def contains(self, ts: datetime) -> bool:
        return self.start <= ts <= self.end


@dataclass(frozen=True)
class Period:
    """One contiguous sub-interval of a TimeRange.

    ``index`` is the period's position in its generated sequence and is the
    key buckets are stored under; ``label`` is only for display.
    """

    index: int
    label: str
    start: datetime
    end: datetime

    def contains(self, ts: datetime) -> bool:
        return self.start <= ts <= self.end


@dataclass(frozen=True)
class SaleEvent:
    """A completed sale.

    Attributes:
        timestamp: Civil-local time of the sale.
        amount: Sale total; non-numeric values are treated as zero when aggregated.
        channel: Raw "sold by" label as supplied by the data service.
    """

    timestamp: datetime
    amount: Any
    channel: str | None = None


@dataclass(frozen=True)
class OrderEvent:
    """A customer order with its free-form status label."""

    timestamp: datetime
    status: str | None


@dataclass
class SalesBucket:
    """Running sales totals for one period."""

    period: Period
    total_amount: float = 0.0
    channel_amounts: dict[Channel, float] = field(
        default_factory=lambda: {Channel.ONLINE: 0.0, Channel.ON_STORE: 0.0}
    )


@dataclass
class OrdersBucket:
    """Running order counts per status category for one period."""

    period: Period
    status_counts: dict[StatusCategory, int] = field(
        default_factory=lambda: {category: 0 for category in StatusCategory}
    )


@dataclass
class SeriesResult:
    """Result of one series computation.

    Attributes:
        sales_series: Chronological sales records (label, total, online, on_store).
        orders_series: Chronological order records (label plus one count per
            status category).
        sales_range: Window the sales series covers.
        orders_range: Window the orders series covers.
        fetch_errors: Names of the streams ("sales", "orders") whose upstream
            read failed and were replaced by an empty list.
    """

    sales_series: list[dict[str, Any]]
    orders_series: list[dict[str, Any]]
    sales_range: TimeRange
    orders_range: TimeRange
    fetch_errors: list[str] = field(default_factory=list)

    def to_frames(self) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Return the sales and orders series as DataFrames, in that order."""
        sales_df = pd.DataFrame(
            self.sales_series, columns=["label", "total", "online", "on_store"]
        )
        orders_df = pd.DataFrame(
            self.orders_series,
            columns=["label"] + [category.value for category in StatusCategory],
        )
        return sales_df, orders_df
