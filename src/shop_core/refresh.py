"""Fetch-and-aggregate cycle for the dashboard charts.

A refresh reads sales and orders concurrently, waits for both, and computes
the series. Refreshes are issued on initial load and whenever either
granularity selection changes, so several may be in flight at once. Each
refresh takes a token from a generation counter; only the refresh holding
the latest token may commit its result, whatever order the reads finish in.
A request with an unknown granularity is rejected before it takes a token.

A failed read never fails the refresh: the stream is replaced by an empty
list, the error is logged and the stream is named in
``SeriesResult.fetch_errors``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from shop_core.analytics.api import compute_series
from shop_core.analytics.types import Granularity, SeriesResult
from shop_core.sources.base import OrdersReader, SalesReader

logger = logging.getLogger(__name__)


class SeriesRefresher:
    """Runs refresh cycles and keeps the latest committed result.

    Attributes:
        current: Result of the most recent non-superseded refresh, or None.
        generation: Token of the most recently started refresh.
    """

    def __init__(
        self,
        sales_reader: SalesReader,
        orders_reader: OrdersReader,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.sales_reader = sales_reader
        self.orders_reader = orders_reader
        self.clock = clock
        self.current: SeriesResult | None = None
        self.generation = 0

    def _next_token(self) -> int:
        self.generation += 1
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation

    @staticmethod
    def _settle(stream: str, outcome: Any, errors: list[str]) -> list:
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.error(
                "Fetching %s failed (%s): %s; continuing with no %s records",
                stream,
                type(outcome).__name__,
                outcome,
                stream,
            )
            errors.append(stream)
            return []
        return outcome

    async def refresh(
        self,
        sales_granularity: Granularity | str,
        orders_granularity: Granularity | str,
        now: datetime | None = None,
    ) -> SeriesResult | None:
        """Fetch both streams and recompute the series.

        Args:
            sales_granularity: Resolution of the sales series.
            orders_granularity: Resolution of the orders series.
            now: Reference instant; defaults to ``clock()`` once both reads finish.

        Returns:
            The committed SeriesResult, or None when a newer refresh started
            while this one was in flight (its result is discarded).

        Raises:
            ConfigError: If either granularity is unknown.
        """
        sales_granularity = Granularity.parse(sales_granularity)
        orders_granularity = Granularity.parse(orders_granularity)
        token = self._next_token()

        logger.debug(
            "Refresh %d started (sales=%s, orders=%s)",
            token,
            sales_granularity.value,
            orders_granularity.value,
        )
        sales_outcome, orders_outcome = await asyncio.gather(
            asyncio.to_thread(self.sales_reader.fetch),
            asyncio.to_thread(self.orders_reader.fetch),
            return_exceptions=True,
        )

        errors: list[str] = []
        sales_events = self._settle("sales", sales_outcome, errors)
        order_events = self._settle("orders", orders_outcome, errors)

        result = compute_series(
            sales_granularity,
            orders_granularity,
            now if now is not None else self.clock(),
            sales_events,
            order_events,
        )
        result.fetch_errors = errors

        if not self.is_current(token):
            logger.info(
                "Discarding refresh %d: superseded by refresh %d", token, self.generation
            )
            return None

        self.current = result
        return result
