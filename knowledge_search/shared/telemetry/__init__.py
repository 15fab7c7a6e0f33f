"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from knowledge_search.shared.telemetry.logging import get_logger, setup_logging
from knowledge_search.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from knowledge_search.shared.telemetry.tracing import (
    TracedOperation,
    add_span_attributes,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "TracedOperation",
]
