"""
UTC datetime utilities for consistent timezone handling.

Documents store times as epoch milliseconds; entities carry timezone-aware
UTC datetimes. Convert only through these helpers.
"""

from datetime import UTC, datetime

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def from_timestamp_ms_utc(timestamp_ms: int) -> datetime:
    """
    Create a UTC-aware datetime from a millisecond Unix timestamp.

    Args:
        timestamp_ms: Unix timestamp in milliseconds

    Returns:
        UTC-aware datetime
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)


def format_display(dt: datetime | None) -> str:
    """Format as 'YYYY-MM-DD HH:MM:SS' (UTC); empty string for None."""
    if dt is None:
        return ""
    return dt.astimezone(UTC).strftime(DISPLAY_FORMAT)
