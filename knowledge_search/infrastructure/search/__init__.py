"""Search infrastructure: Elasticsearch store, query builder, repositories, bootstrap."""

from knowledge_search.infrastructure.search.bootstrap import IndexBootstrapper
from knowledge_search.infrastructure.search.client import ElasticsearchStore
from knowledge_search.infrastructure.search.factory import build_search_service
from knowledge_search.infrastructure.search.query_builder import (
    DEFAULT_HIGHLIGHT,
    FieldConfig,
    HighlightConfig,
    build_search_body,
    parse_highlights,
)

__all__ = [
    "DEFAULT_HIGHLIGHT",
    "ElasticsearchStore",
    "FieldConfig",
    "HighlightConfig",
    "IndexBootstrapper",
    "build_search_body",
    "build_search_service",
    "parse_highlights",
]
