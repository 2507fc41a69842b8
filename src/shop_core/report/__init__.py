"""Sales report over raw sale rows.

Example:
    >>> from shop_core.report import build_sales_report
    >>>
    >>> report = build_sales_report(rows, granularity="monthly", channel="Online")
    >>> report.summary["total_sales"]
    >>> report.to_csv("Sales_Report.csv")
"""

from shop_core.report.sales_report import REPORT_COLUMNS, SalesReport, build_sales_report

__all__ = ["REPORT_COLUMNS", "SalesReport", "build_sales_report"]
