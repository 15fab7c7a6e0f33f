"""Elasticsearch document store adapter.

Thin wrapper over the official async client implementing IDocumentStore.
Client errors are translated to SearchStoreError so callers never depend
on elasticsearch exception types.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from elasticsearch import ApiError, AsyncElasticsearch, TransportError

from knowledge_search.infrastructure.exceptions import SearchStoreError

if TYPE_CHECKING:
    from knowledge_search.core.config import Settings

logger = logging.getLogger(__name__)


class ElasticsearchStore:
    """IDocumentStore backed by AsyncElasticsearch.

    The client keeps its own connection pool; one instance is shared by
    every repository, the bootstrapper and the sync service.
    """

    def __init__(self, client: AsyncElasticsearch) -> None:
        """Initialize with an existing client. Pass a mock for testing."""
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> ElasticsearchStore:
        """Build a store from application settings."""
        kwargs: dict[str, Any] = {
            "request_timeout": settings.elasticsearch_request_timeout,
        }
        if settings.elasticsearch_username and settings.elasticsearch_password:
            kwargs["basic_auth"] = (
                settings.elasticsearch_username,
                settings.elasticsearch_password.get_secret_value(),
            )
        logger.info("Elasticsearch store configured: %s", settings.elasticsearch_url)
        return cls(AsyncElasticsearch(settings.elasticsearch_url, **kwargs))

    async def search(self, index: str, body: dict[str, Any]) -> list[dict[str, Any]]:
        """Run body against index; return hits in relevance order."""
        try:
            response = await self.client.search(index=index, **body)
        except (ApiError, TransportError) as e:
            raise SearchStoreError("search", index, str(e)) from e
        return list(response["hits"]["hits"])

    async def index(self, index: str, doc_id: str, document: dict[str, Any]) -> None:
        """Index document under doc_id, overwriting any previous version."""
        try:
            await self.client.index(index=index, id=doc_id, document=document)
        except (ApiError, TransportError) as e:
            raise SearchStoreError("index", index, str(e)) from e

    async def index_exists(self, index: str) -> bool:
        try:
            return bool(await self.client.indices.exists(index=index))
        except (ApiError, TransportError) as e:
            raise SearchStoreError("exists", index, str(e)) from e

    async def create_index(self, index: str, body: dict[str, Any]) -> None:
        """Create index with body's settings and mappings."""
        try:
            await self.client.indices.create(index=index, **body)
        except (ApiError, TransportError) as e:
            raise SearchStoreError("create", index, str(e)) from e
        logger.info("Created index: %s", index)

    async def close(self) -> None:
        await self.client.close()
        logger.info("Elasticsearch client closed")
