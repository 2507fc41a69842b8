"""Display label formatting for periods.

Labels are built from fixed English names so they do not depend on the
process locale.
"""

from datetime import date

# English month abbreviations (January through December)
MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
]


def format_day_label(d: date) -> str:
    """Format a day period label like '01/14/2025'.

    Args:
        d: Date object to format

    Returns:
        Zero-padded month/day/year string
    """
    return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"


def format_month_label(d: date) -> str:
    """Format a month period label like 'Jan 2025'."""
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.year}"
