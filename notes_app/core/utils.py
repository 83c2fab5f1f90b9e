"""
Core Utilities.

Shared utility functions used across the application.
All modules should import utilities from this module.
"""

from datetime import datetime, timezone

LAST_UPDATED_FORMAT = "%b %d, %Y %H:%M"


def current_time_millis() -> int:
    """
    Return the current time as integer epoch milliseconds.

    Note timestamps are stored in this unit; it is both the display
    value and the sort key of the note list.
    """
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def format_timestamp(timestamp: int, tz: timezone | None = None) -> str:
    """
    Format epoch milliseconds as e.g. "Mar 04, 2026 09:15".

    Args:
        timestamp: Epoch milliseconds
        tz: Target timezone; local time when omitted

    Returns:
        Human readable date and time
    """
    moment = datetime.fromtimestamp(timestamp / 1000, tz=tz)
    return moment.strftime(LAST_UPDATED_FORMAT)
