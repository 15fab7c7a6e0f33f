"""Index sync use case: resolve a sync event's index and upsert its document."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from knowledge_search.core.constants import SYNC_INDEX_TABLE
from knowledge_search.domain.exceptions import (
    SyncDecodeError,
    SyncUpsertError,
    UnknownBizError,
)
from knowledge_search.shared.telemetry.logging import get_logger
from knowledge_search.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from knowledge_search.application.dtos.sync import SyncEvent
    from knowledge_search.application.interfaces.repositories import IDocumentStore

logger = get_logger(__name__)


def resolve_index(biz: str) -> str:
    """Return the index that receives documents for biz.

    Raises:
        UnknownBizError: If biz is not in the fixed table.
    """
    try:
        return SYNC_INDEX_TABLE[biz]
    except KeyError:
        raise UnknownBizError(biz) from None


def decode_document(data: str) -> dict[str, Any]:
    """Parse the JSON document carried by a sync event.

    Raises:
        SyncDecodeError: If data is not a JSON object.
    """
    try:
        document = json.loads(data)
    except json.JSONDecodeError as e:
        raise SyncDecodeError(f"invalid document JSON: {e}") from e
    if not isinstance(document, dict):
        raise SyncDecodeError("document must be a JSON object")
    return document


class IndexSyncService:
    """Write side of the search indices. Upserts are idempotent by document id."""

    def __init__(self, store: IDocumentStore) -> None:
        self.store = store

    @traced("sync.input")
    async def input(self, index: str, doc_id: str, data: str) -> None:
        """Upsert data (a JSON document) into index under doc_id.

        Raises:
            SyncDecodeError: If data is not a JSON object.
            SyncUpsertError: If the store rejects the write.
        """
        document = decode_document(data)
        try:
            await self.store.index(index, doc_id, document)
        except Exception as e:
            raise SyncUpsertError(index, doc_id, str(e)) from e
        logger.debug("Indexed document %s into %s", doc_id, index)

    async def apply(self, event: SyncEvent) -> str:
        """Resolve event's index and upsert its document; return the index name.

        Raises:
            UnknownBizError: If event.biz maps to no index.
            SyncDecodeError: If event.data is not a JSON object.
            SyncUpsertError: If the store rejects the write.
        """
        index = resolve_index(event.biz)
        await self.input(index=index, doc_id=event.biz_id, data=event.data)
        return index
