"""Timestamp and date formatting utilities."""

from datetime import date, datetime
from typing import Union

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def now() -> str:
    """Current local time as a compact sortable stamp (e.g., "20261016_134501")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_date(value: Union[date, datetime, str, None]) -> str:
    """
    Format a publication date in long US English form.

    Accepts date/datetime objects or ISO 8601 strings as they appear in front
    matter. Strings that cannot be parsed are returned unchanged so a page
    still renders whatever the author wrote.

    Args:
        value: Date value from front matter

    Returns:
        Human-readable date

    Examples:
        format_date("2026-10-16")
        # "October 16, 2026"

        format_date(datetime(2024, 3, 5, 9, 30))
        # "March 5, 2024"
    """
    if value is None:
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            return value

    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"
