"""REST readers for the shop data service.

The service exposes tables through a PostgREST-style HTTP API:

    GET {base_url}/rest/v1/{table}?select=col1,col2&order=col.asc&col=in.(...)

Requests carry the API key both as ``apikey`` header and as a bearer token.

Environment (via ShopConfig.from_env):
  SHOP_API_URL: Service root URL
  SHOP_API_KEY: API key
  SHOP_TIMEOUT=30   # seconds
  SHOP_RETRIES=3
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from shop_core.analytics.types import OrderEvent, SaleEvent
from shop_core.config import DEFAULT_RETRIES, DEFAULT_TIMEOUT, ShopConfig
from shop_core.exceptions import DataFetchError
from shop_core.sources.records import parse_order_records, parse_sale_records

logger = logging.getLogger(__name__)

REST_PREFIX = "/rest/v1"

SALES_COLUMNS = ("id", "total", "date", "sold_by")
ORDERS_COLUMNS = ("id", "created_at", "status")

# Statuses the orders chart reports on; anything else is filtered server-side.
REPORTED_ORDER_STATUSES = ("Pending", "Paid", "To Ship", "To Receive", "Completed", "Cancelled")

RETRY_STATUSES = (429, 500, 502, 503, 504)


def make_session(
    timeout: float = DEFAULT_TIMEOUT, retries: int = DEFAULT_RETRIES
) -> requests.Session:
    """Build the session RestClient reads through.

    Table reads are idempotent GETs, so throttling (429) and gateway errors
    from the data service are retried with backoff. Every call gets
    ``timeout`` unless the caller passes its own.

    Args:
        timeout: Per-request timeout in seconds (SHOP_TIMEOUT).
        retries: Retry budget per read (SHOP_RETRIES).
    """
    session = requests.Session()
    session.headers["Accept"] = "application/json"
    adapter = HTTPAdapter(
        max_retries=Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=RETRY_STATUSES,
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
        )
    )
    for prefix in ("http://", "https://"):
        session.mount(prefix, adapter)

    send = session.request

    def request_with_timeout(method: str, url: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return send(method, url, **kwargs)

    session.request = request_with_timeout  # type: ignore[method-assign,assignment]
    return session


def in_filter(values: Sequence[str]) -> str:
    """Build a PostgREST ``in`` filter value, quoting each item.

    Examples:
        >>> in_filter(["Paid", "To Ship"])
        'in.("Paid","To Ship")'
    """
    quoted = ",".join(f'"{v}"' for v in values)
    return f"in.({quoted})"


class RestClient:
    """Thin read-only client over the service's table endpoints."""

    def __init__(self, config: ShopConfig, session: requests.Session | None = None):
        config.require_remote()
        self.config = config
        self.session = session or make_session(config.timeout, config.retries)
        self.session.headers.update(
            {
                "apikey": str(config.api_key),
                "Authorization": f"Bearer {config.api_key}",
            }
        )

    def select(
        self,
        table: str,
        columns: Sequence[str],
        order: str | None = None,
        filters: Mapping[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch rows from ``table``.

        Args:
            table: Table name, e.g. "sales".
            columns: Columns to select.
            order: Optional ``column.asc`` / ``column.desc`` ordering.
            filters: Extra PostgREST filters, e.g. ``{"status": in_filter([...])}``.

        Returns:
            List of row dicts.

        Raises:
            DataFetchError: On network failure, non-2xx status or a body that
                is not a JSON list.
        """
        url = f"{self.config.base_url}{REST_PREFIX}/{table}"
        params: dict[str, str] = {"select": ",".join(columns)}
        if order:
            params["order"] = order
        if filters:
            params.update(filters)

        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params)
        except requests.RequestException as e:
            raise DataFetchError(f"Request to {table} failed: {e}") from e

        if not (200 <= resp.status_code < 300):
            raise DataFetchError(
                f"Fetching {table} failed. HTTP {resp.status_code} - {resp.text[:400]}"
            )

        try:
            rows = resp.json()
        except ValueError as e:
            raise DataFetchError(f"Response for {table} is not valid JSON: {e}") from e
        if not isinstance(rows, list):
            raise DataFetchError(
                f"Response for {table} is a {type(rows).__name__}, expected a list of rows"
            )

        logger.info("Fetched %d row(s) from %s", len(rows), table)
        return rows


class RestSalesReader:
    """Reads completed sales, oldest first."""

    def __init__(self, client: RestClient):
        self.client = client

    def fetch(self) -> list[SaleEvent]:
        rows = self.client.select(
            self.client.config.sales_table,
            SALES_COLUMNS,
            order="date.asc",
        )
        return parse_sale_records(rows, self.client.config.timezone)


class RestOrdersReader:
    """Reads orders in the reported statuses, oldest first."""

    def __init__(self, client: RestClient):
        self.client = client

    def fetch(self) -> list[OrderEvent]:
        rows = self.client.select(
            self.client.config.orders_table,
            ORDERS_COLUMNS,
            order="created_at.asc",
            filters={"status": in_filter(REPORTED_ORDER_STATUSES)},
        )
        return parse_order_records(rows, self.client.config.timezone)
