"""Reader interfaces consumed by the refresh cycle.

Any object with a matching ``fetch()`` satisfies these protocols; transport
is opaque to the analytics engine.
"""

from __future__ import annotations

from typing import Protocol

from shop_core.analytics.types import OrderEvent, SaleEvent


class SalesReader(Protocol):
    """Supplies the completed sales to aggregate.

    Example:
        class StaticSales:
            def fetch(self) -> list[SaleEvent]:
                return [SaleEvent(datetime(2025, 1, 14), 100.0, "Online")]

    """

    def fetch(self) -> list[SaleEvent]:
        """Return every sale event; raise DataFetchError if upstream is unreachable."""
        ...


class OrdersReader(Protocol):
    """Supplies the customer orders to aggregate."""

    def fetch(self) -> list[OrderEvent]:
        """Return every order event; raise DataFetchError if upstream is unreachable."""
        ...
