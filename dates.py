"""Date helpers for stamping transactions."""

from datetime import date

DATE_FORMAT = "%Y-%m-%d"


def current_date() -> str:
    """Get today's local calendar date as a YYYY-MM-DD string."""
    return date.today().strftime(DATE_FORMAT)
