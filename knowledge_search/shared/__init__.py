"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from knowledge_search.shared.context import (
    get_request_id,
    reset_request_id,
    set_request_id,
)
from knowledge_search.shared.utils import format_display, from_timestamp_ms_utc

__all__ = [
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "format_display",
    "from_timestamp_ms_utc",
]
