"""Command-line interface for shop-core.

Examples:
  # Weekly sales and monthly orders from the data service (SHOP_API_URL/SHOP_API_KEY)
  shop-core series --sales-granularity weekly --orders-granularity monthly

  # Same, from CSV exports, anchored at a fixed instant
  shop-core series --sales-csv sales.csv --orders-csv orders.csv --now 2025-01-17T12:00

  # Monthly online sales report written to CSV
  shop-core report --sales-csv sales.csv --granularity monthly --channel Online \
      --output Sales_Report.csv
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from datetime import datetime

import pandas as pd

from shop_core.analytics.types import Granularity
from shop_core.config import ShopConfig
from shop_core.exceptions import ShopCoreError
from shop_core.formatters.console import format_report_for_console, format_series_for_console
from shop_core.refresh import SeriesRefresher
from shop_core.report.sales_report import build_sales_report
from shop_core.sources.files import CsvOrdersReader, CsvSalesReader, read_table_csv
from shop_core.sources.rest import RestClient, RestOrdersReader, RestSalesReader

logger = logging.getLogger(__name__)

GRANULARITY_CHOICES = [g.value for g in Granularity]


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid --now value {value!r}: {e}") from e


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shop-core",
        description="Sales and order analytics for the shop dashboard.",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    series = sub.add_parser("series", help="Compute the sales and orders chart series.")
    series.add_argument(
        "--sales-granularity",
        default="weekly",
        choices=GRANULARITY_CHOICES,
        help="Resolution of the sales series (default: weekly).",
    )
    series.add_argument(
        "--orders-granularity",
        default="weekly",
        choices=GRANULARITY_CHOICES,
        help="Resolution of the orders series (default: weekly).",
    )
    series.add_argument("--sales-csv", help="Read sales from this CSV export instead of the service.")
    series.add_argument("--orders-csv", help="Read orders from this CSV export instead of the service.")
    series.add_argument("--now", help="Reference instant (ISO format). Defaults to the current time.")

    report = sub.add_parser("report", help="Build the sales report.")
    report.add_argument("--sales-csv", help="Read sales from this CSV export instead of the service.")
    report.add_argument(
        "--granularity",
        choices=GRANULARITY_CHOICES,
        help="Only include sales in the current day/week/month/year.",
    )
    report.add_argument("--channel", help='Only include sales sold "Online" or "On Store".')
    report.add_argument("--output", "-o", help="Write the report lines to this CSV path.")
    report.add_argument("--now", help="Reference instant (ISO format). Defaults to the current time.")
    return p


def _run_series(args: argparse.Namespace, config: ShopConfig) -> int:
    client = None
    if not (args.sales_csv and args.orders_csv):
        client = RestClient(config)

    sales_reader = (
        CsvSalesReader(args.sales_csv, config.timezone) if args.sales_csv else RestSalesReader(client)
    )
    orders_reader = (
        CsvOrdersReader(args.orders_csv, config.timezone)
        if args.orders_csv
        else RestOrdersReader(client)
    )

    refresher = SeriesRefresher(sales_reader, orders_reader)
    result = asyncio.run(
        refresher.refresh(
            args.sales_granularity,
            args.orders_granularity,
            now=_parse_now(args.now),
        )
    )
    if result is not None:
        print(format_series_for_console(result))
    return 0


def _run_report(args: argparse.Namespace, config: ShopConfig) -> int:
    if args.sales_csv:
        rows = read_table_csv(args.sales_csv)
    else:
        client = RestClient(config)
        rows = pd.DataFrame(client.select(config.sales_table, ("*",), order="date.desc"))

    report = build_sales_report(
        rows,
        now=_parse_now(args.now),
        granularity=args.granularity,
        channel=args.channel,
        timezone=config.timezone,
    )
    print(format_report_for_console(report))
    if args.output:
        path = report.to_csv(args.output)
        print(f"Wrote: {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ShopConfig.from_env()
        if args.command == "series":
            return _run_series(args, config)
        return _run_report(args, config)
    except (ShopCoreError, argparse.ArgumentTypeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
