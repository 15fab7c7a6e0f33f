"""Pydantic request/response schemas for the API."""

from knowledge_search.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from knowledge_search.schemas.search import (
    CompactItem,
    CompactSearchResponse,
    SearchRequest,
    SearchResponse,
    to_compact_response,
)

__all__ = [
    "CompactItem",
    "CompactSearchResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SearchRequest",
    "SearchResponse",
    "to_compact_response",
]
