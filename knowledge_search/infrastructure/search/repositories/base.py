"""Base search repository: split, build, query, decode for one index.

Subclasses supply the field table and map a hit's _source (plus its
highlight fragments) to a domain entity via _to_entity.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Generic, TypeVar

from knowledge_search.application.interfaces.repositories import IDocumentStore
from knowledge_search.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from knowledge_search.domain.entities import EsVal
from knowledge_search.domain.enums import PublishStatus
from knowledge_search.domain.value_objects import split_terms
from knowledge_search.infrastructure.exceptions import DocumentDecodeError
from knowledge_search.infrastructure.search.query_builder import (
    FieldConfig,
    build_search_body,
    parse_highlights,
)
from knowledge_search.shared.utils.datetime import from_timestamp_ms_utc

EntityT = TypeVar("EntityT")

PUBLISHED_FILTER: dict[str, Any] = {"term": {"status": PublishStatus.PUBLISHED.value}}


def normalize_page(
    offset: int,
    limit: int,
    default_limit: int = DEFAULT_PAGE_SIZE,
    max_limit: int = MAX_PAGE_SIZE,
) -> tuple[int, int]:
    """Clamp offset to >= 0 and limit to 1..max_limit (default when not positive)."""
    if limit <= 0:
        limit = default_limit
    return max(offset, 0), min(limit, max_limit)


class ElasticSearchRepository(Generic[EntityT]):
    """Keyword search over one index with a fixed field table.

    Results keep the store's relevance order. A hit that cannot be mapped
    fails the whole call with DocumentDecodeError; hits are never skipped.
    """

    def __init__(
        self,
        store: IDocumentStore,
        index: str,
        fields: Sequence[FieldConfig],
        filters: Sequence[dict[str, Any]] = (),
        max_limit: int = MAX_PAGE_SIZE,
        default_limit: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.store = store
        self.index = index
        self.fields = tuple(fields)
        self.filters = tuple(filters)
        self.max_limit = max_limit
        self.default_limit = default_limit

    async def search(self, keywords: str, offset: int, limit: int) -> list[EntityT]:
        """Search keywords; return up to limit entities starting at offset."""
        terms = split_terms(keywords)
        if not terms:
            return []
        offset, limit = normalize_page(
            offset, limit, default_limit=self.default_limit, max_limit=self.max_limit
        )
        body = build_search_body(self.fields, terms, offset, limit, self.filters)
        if body is None:
            return []
        hits = await self.store.search(self.index, body)
        return [self._decode(hit) for hit in hits]

    def _decode(self, hit: dict[str, Any]) -> EntityT:
        doc_id = str(hit.get("_id", ""))
        try:
            source = hit["_source"]
            if not isinstance(source, dict):
                raise TypeError("_source must be an object")
            return self._to_entity(source, parse_highlights(hit))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DocumentDecodeError(self.index, doc_id, str(e)) from e

    def _to_entity(
        self, source: dict[str, Any], highlights: dict[str, list[str]]
    ) -> EntityT:
        """Map one document to its entity. Override in subclasses."""
        raise NotImplementedError


# _source field readers. Missing or null fields take the zero value; present
# fields of the wrong type raise so the hit fails to decode.


def read_int(source: dict[str, Any], key: str) -> int:
    value = source.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {type(value).__name__}")
    return value


def read_str(source: dict[str, Any], key: str) -> str:
    value = source.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


def read_str_list(source: dict[str, Any], key: str) -> list[str]:
    value = source.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{key} must be a list of strings")
    return list(value)


def read_int_list(source: dict[str, Any], key: str) -> list[int]:
    value = source.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        raise ValueError(f"{key} must be a list of integers")
    return list(value)


def read_object(source: dict[str, Any], key: str) -> dict[str, Any]:
    value = source.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be an object")
    return value


def read_time(source: dict[str, Any], key: str) -> datetime | None:
    """Epoch-millisecond field as a UTC datetime; 0 or missing is None."""
    ms = read_int(source, key)
    return from_timestamp_ms_utc(ms) if ms else None


def read_status(source: dict[str, Any]) -> PublishStatus:
    """Publication status; values outside the enum read as UNKNOWN."""
    value = read_int(source, "status")
    try:
        return PublishStatus(value)
    except ValueError:
        return PublishStatus.UNKNOWN


def read_text(
    source: dict[str, Any],
    key: str,
    highlights: dict[str, list[str]],
    path: str | None = None,
) -> EsVal:
    """Text field with the fragments highlighted under path (defaults to key)."""
    return EsVal(
        value=read_str(source, key),
        highlights=list(highlights.get(path or key, [])),
    )
