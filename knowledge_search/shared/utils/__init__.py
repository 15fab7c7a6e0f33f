"""Shared utilities: datetime conversion."""

from knowledge_search.shared.utils.datetime import format_display, from_timestamp_ms_utc

__all__ = ["format_display", "from_timestamp_ms_utc"]
