"""Index bootstrap: create missing indices from packaged schemas at startup.

Runs once per index name per process. Existing indices are left untouched;
mapping changes are never migrated here.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from knowledge_search.core.constants import (
    CASE_INDEX,
    PUB_CASE_INDEX,
    PUB_QUESTION_INDEX,
    QUESTION_INDEX,
    QUESTION_SET_INDEX,
    SKILL_INDEX,
)
from knowledge_search.domain.exceptions import BootstrapError
from knowledge_search.infrastructure.exceptions import SearchStoreError

if TYPE_CHECKING:
    from knowledge_search.application.interfaces.repositories import IDocumentStore

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schemas"

# Published and draft indices of one entity share a schema file.
INDEX_SCHEMA_FILES: dict[str, str] = {
    PUB_CASE_INDEX: "case_index.json",
    CASE_INDEX: "case_index.json",
    PUB_QUESTION_INDEX: "question_index.json",
    QUESTION_INDEX: "question_index.json",
    SKILL_INDEX: "skill_index.json",
    QUESTION_SET_INDEX: "question_set_index.json",
}


def load_schema(filename: str) -> dict[str, Any]:
    """Read a packaged index schema (settings + mappings)."""
    with (SCHEMA_DIR / filename).open(encoding="utf-8") as f:
        return json.load(f)


def default_schemas() -> dict[str, dict[str, Any]]:
    """Schema for every index the service reads or writes, keyed by index name."""
    return {index: load_schema(name) for index, name in INDEX_SCHEMA_FILES.items()}


class IndexBootstrapper:
    """Ensures each index exists exactly once per process.

    Concurrent ensure_index calls for the same name serialize on a per-name
    lock; after the first success later calls return without touching the
    store.
    """

    def __init__(
        self,
        store: IDocumentStore,
        schemas: Mapping[str, dict[str, Any]] | None = None,
    ) -> None:
        self.store = store
        self.schemas = dict(schemas) if schemas is not None else default_schemas()
        self._locks: dict[str, asyncio.Lock] = {}
        self._ensured: set[str] = set()

    def is_ensured(self, name: str) -> bool:
        return name in self._ensured

    @property
    def complete(self) -> bool:
        """True once every configured index has been ensured."""
        return all(name in self._ensured for name in self.schemas)

    async def ensure_index(
        self, name: str, schema: dict[str, Any] | None = None
    ) -> bool:
        """Create index name from schema if it does not exist.

        Args:
            name: Index name.
            schema: Settings and mappings; defaults to the configured schema.

        Returns:
            True if this call created the index, False otherwise.

        Raises:
            BootstrapError: If no schema is known or the store fails.
        """
        if name in self._ensured:
            return False
        lock = self._locks.setdefault(name, asyncio.Lock())
        async with lock:
            if name in self._ensured:
                return False
            body = schema if schema is not None else self.schemas.get(name)
            if body is None:
                raise BootstrapError(name, "no schema configured")
            created = await self._create_if_missing(name, body)
            self._ensured.add(name)
            return created

    async def _create_if_missing(self, name: str, body: dict[str, Any]) -> bool:
        try:
            if await self.store.index_exists(name):
                logger.debug("Index %s already exists", name)
                return False
            try:
                await self.store.create_index(name, body)
            except SearchStoreError:
                # Another process may have created it between the two calls.
                if await self.store.index_exists(name):
                    logger.info("Index %s created concurrently elsewhere", name)
                    return False
                raise
        except SearchStoreError as e:
            raise BootstrapError(name, str(e.details.get("reason", e.message))) from e
        logger.info("Created index %s", name)
        return True

    async def ensure_all(self) -> None:
        """Ensure every configured index concurrently; the first failure propagates."""
        await asyncio.gather(*(self.ensure_index(name) for name in self.schemas))
        logger.info("Index bootstrap complete: %d indices", len(self.schemas))
