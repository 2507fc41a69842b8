"""Output formatters for series and reports."""

from shop_core.formatters.console import format_report_for_console, format_series_for_console

__all__ = ["format_report_for_console", "format_series_for_console"]
