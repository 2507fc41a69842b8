"""CSV readers for exported ``sales`` and ``orders`` tables.

Useful offline (and in tests): the files have the same columns as the
service tables.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from shop_core.analytics.types import OrderEvent, SaleEvent
from shop_core.config import DEFAULT_TIMEZONE
from shop_core.exceptions import DataFetchError
from shop_core.sources.records import parse_order_records, parse_sale_records

logger = logging.getLogger(__name__)


def read_table_csv(path: str | Path) -> pd.DataFrame:
    """Load an exported table.

    Raises:
        DataFetchError: If the file is missing or cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        raise DataFetchError(f"Export file not found: {path}")
    try:
        df = pd.read_csv(path, encoding="utf-8")
    except (OSError, ValueError, pd.errors.ParserError) as e:
        raise DataFetchError(f"Could not read {path}: {e}") from e

    logger.info("Loaded %d row(s) from %s", len(df), path)
    return df


class CsvSalesReader:
    """Reads sale events from a ``sales`` CSV export."""

    def __init__(self, path: str | Path, timezone: str = DEFAULT_TIMEZONE):
        self.path = Path(path)
        self.timezone = timezone

    def fetch(self) -> list[SaleEvent]:
        df = read_table_csv(self.path)
        return parse_sale_records(df.to_dict(orient="records"), self.timezone)


class CsvOrdersReader:
    """Reads order events from an ``orders`` CSV export."""

    def __init__(self, path: str | Path, timezone: str = DEFAULT_TIMEZONE):
        self.path = Path(path)
        self.timezone = timezone

    def fetch(self) -> list[OrderEvent]:
        df = read_table_csv(self.path)
        return parse_order_records(df.to_dict(orient="records"), self.timezone)
