"""IndexBootstrapper: create-if-missing, once per index, race tolerant."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from knowledge_search.domain.exceptions import BootstrapError
from knowledge_search.infrastructure.exceptions import SearchStoreError
from knowledge_search.infrastructure.search.bootstrap import (
    INDEX_SCHEMA_FILES,
    IndexBootstrapper,
    default_schemas,
)
from tests.fakes import FakeDocumentStore

ALL_INDICES = {
    "case_index",
    "pub_case_index",
    "question_index",
    "pub_question_index",
    "skill_index",
    "question_set_index",
}


def test_default_schemas_cover_every_index() -> None:
    schemas = default_schemas()
    assert set(schemas) == ALL_INDICES == set(INDEX_SCHEMA_FILES)
    for body in schemas.values():
        assert "mappings" in body and "settings" in body
    assert schemas["case_index"]["mappings"]["properties"]["labels"] == {"type": "keyword"}
    assert schemas["pub_case_index"] == schemas["case_index"]


async def test_ensure_all_creates_missing_indices(fake_store: FakeDocumentStore) -> None:
    bootstrapper = IndexBootstrapper(fake_store)
    assert not bootstrapper.complete

    await bootstrapper.ensure_all()

    assert set(fake_store.indices) == ALL_INDICES
    assert bootstrapper.complete


async def test_existing_index_is_left_untouched(fake_store: FakeDocumentStore) -> None:
    fake_store.indices["skill_index"] = {"custom": True}
    bootstrapper = IndexBootstrapper(fake_store)

    created = await bootstrapper.ensure_index("skill_index")

    assert created is False
    assert fake_store.indices["skill_index"] == {"custom": True}
    assert bootstrapper.is_ensured("skill_index")


async def test_concurrent_calls_create_once() -> None:
    store = AsyncMock()
    store.index_exists = AsyncMock(return_value=False)
    bootstrapper = IndexBootstrapper(store, schemas={"case_index": {"mappings": {}}})

    results = await asyncio.gather(*(bootstrapper.ensure_index("case_index") for _ in range(5)))

    assert results.count(True) == 1
    store.create_index.assert_awaited_once_with("case_index", {"mappings": {}})


async def test_ensured_index_does_not_touch_store_again() -> None:
    store = AsyncMock()
    store.index_exists = AsyncMock(return_value=True)
    bootstrapper = IndexBootstrapper(store, schemas={"case_index": {}})

    await bootstrapper.ensure_index("case_index")
    await bootstrapper.ensure_index("case_index")

    store.index_exists.assert_awaited_once()


async def test_create_race_with_another_process_is_tolerated() -> None:
    store = AsyncMock()
    store.index_exists = AsyncMock(side_effect=[False, True])
    store.create_index = AsyncMock(
        side_effect=SearchStoreError("create", "case_index", "resource_already_exists_exception")
    )
    bootstrapper = IndexBootstrapper(store, schemas={"case_index": {}})

    assert await bootstrapper.ensure_index("case_index") is False
    assert bootstrapper.is_ensured("case_index")


async def test_store_failure_raises_bootstrap_error(fake_store: FakeDocumentStore) -> None:
    fake_store.fail_create = True
    bootstrapper = IndexBootstrapper(fake_store)

    with pytest.raises(BootstrapError) as exc_info:
        await bootstrapper.ensure_index("question_index")

    assert exc_info.value.details == {"index": "question_index", "reason": "simulated failure"}
    assert not bootstrapper.is_ensured("question_index")


async def test_unknown_index_without_schema() -> None:
    bootstrapper = IndexBootstrapper(AsyncMock(), schemas={})

    with pytest.raises(BootstrapError):
        await bootstrapper.ensure_index("nope")
