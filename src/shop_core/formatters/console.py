"""Console output formatting utilities."""

from __future__ import annotations

from shop_core.analytics.types import SeriesResult
from shop_core.report.sales_report import SalesReport

ORDER_COLUMN_NAMES = {
    "label": "Period",
    "pending": "Pending",
    "paid_to_ship": "Paid/To Ship",
    "to_receive": "To Receive",
    "completed": "Completed",
    "cancelled": "Cancelled",
}

SALES_COLUMN_NAMES = {
    "label": "Period",
    "total": "Total Sales",
    "online": "Online",
    "on_store": "On Store",
}


def format_series_for_console(result: SeriesResult) -> str:
    """Build a plain-text rendering of both series.

    Args:
        result: SeriesResult from ``compute_series`` or a refresh.

    Returns:
        Human-readable text with a sales table and an orders table.
    """
    sales_df, orders_df = result.to_frames()

    lines = []
    lines.append(
        f"Sales ({result.sales_range.start:%Y-%m-%d} to {result.sales_range.end:%Y-%m-%d})"
    )
    lines.append("=" * 60)
    if sales_df.empty:
        lines.append("No periods.")
    else:
        lines.append(
            sales_df.rename(columns=SALES_COLUMN_NAMES).to_string(
                index=False, float_format=lambda v: f"{v:,.2f}"
            )
        )
    lines.append("")

    lines.append(
        f"Orders ({result.orders_range.start:%Y-%m-%d} to {result.orders_range.end:%Y-%m-%d})"
    )
    lines.append("=" * 60)
    if orders_df.empty:
        lines.append("No periods.")
    else:
        lines.append(orders_df.rename(columns=ORDER_COLUMN_NAMES).to_string(index=False))

    if result.fetch_errors:
        lines.append("")
        lines.append(f"Warning: could not fetch {', '.join(result.fetch_errors)}; shown as empty.")

    return "\n".join(lines)


def format_report_for_console(report: SalesReport) -> str:
    """Build the summary block of a sales report."""
    s = report.summary
    return "\n".join(
        [
            "Sales Report",
            "=" * 60,
            f"Lines:        {s['line_count']}",
            f"Items Sold:   {s['items_sold']:g}",
            f"Total Sales:  {s['total_sales']:,.2f}",
            f"Total Profit: {s['total_profit']:,.2f}",
        ]
    )
