"""Unified configuration for shop-core.

This module provides a single configuration class used by the REST readers,
the timestamp parsing and the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from shop_core.exceptions import ConfigError

DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 3
DEFAULT_TIMEZONE = "Asia/Manila"


@dataclass
class ShopConfig:
    """Connection and calendar settings for the shop data service.

    Attributes:
        base_url: Root URL of the data service (e.g. "https://xyz.example.co").
        api_key: Anonymous/service API key sent as ``apikey`` and bearer token.
        timeout: Default HTTP timeout in seconds.
        retries: Retry attempts for idempotent requests.
        timezone: Civil timezone used to turn aware timestamps into local time.
        sales_table: Table holding completed sales.
        orders_table: Table holding customer orders.

    Environment:
        SHOP_API_URL, SHOP_API_KEY, SHOP_TIMEOUT, SHOP_RETRIES, SHOP_TIMEZONE
    """

    base_url: str | None = None
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES
    timezone: str = DEFAULT_TIMEZONE
    sales_table: str = "sales"
    orders_table: str = "orders"

    @classmethod
    def from_env(cls) -> ShopConfig:
        """Create a ShopConfig from SHOP_* environment variables.

        Returns:
            ShopConfig instance.

        Raises:
            ConfigError: If SHOP_TIMEOUT or SHOP_RETRIES is not a number.

        Examples:
            >>> cfg = ShopConfig.from_env()
            >>> cfg.timezone
            'Asia/Manila'
        """
        try:
            timeout = float(os.environ.get("SHOP_TIMEOUT", DEFAULT_TIMEOUT))
            retries = int(os.environ.get("SHOP_RETRIES", DEFAULT_RETRIES))
        except ValueError as e:
            raise ConfigError(f"Invalid SHOP_TIMEOUT/SHOP_RETRIES value: {e}") from e

        if timeout <= 0:
            raise ConfigError(f"SHOP_TIMEOUT must be positive, got {timeout}")
        if retries < 0:
            raise ConfigError(f"SHOP_RETRIES must be >= 0, got {retries}")

        base_url = os.environ.get("SHOP_API_URL") or None
        if base_url:
            base_url = base_url.rstrip("/")

        return cls(
            base_url=base_url,
            api_key=os.environ.get("SHOP_API_KEY") or None,
            timeout=timeout,
            retries=retries,
            timezone=os.environ.get("SHOP_TIMEZONE", DEFAULT_TIMEZONE),
        )

    def require_remote(self) -> None:
        """Ensure the service URL and key are set before any HTTP read."""
        missing = [
            name
            for name, value in (("SHOP_API_URL", self.base_url), ("SHOP_API_KEY", self.api_key))
            if not value
        ]
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
