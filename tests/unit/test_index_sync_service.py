"""IndexSyncService: biz -> index resolution and idempotent upserts."""

from unittest.mock import AsyncMock

import pytest

from knowledge_search.application.dtos.sync import SyncEvent
from knowledge_search.application.use_cases.sync import (
    IndexSyncService,
    decode_document,
    resolve_index,
)
from knowledge_search.domain.exceptions import (
    SyncDecodeError,
    SyncUpsertError,
    UnknownBizError,
)
from tests.fakes import FakeDocumentStore


@pytest.mark.parametrize(
    ("biz", "index"),
    [
        ("case", "case_index"),
        ("pubCase", "pub_case_index"),
        ("question", "question_index"),
        ("pubQuestion", "pub_question_index"),
        ("skill", "skill_index"),
        ("questionSet", "question_set_index"),
    ],
)
def test_resolve_index(biz: str, index: str) -> None:
    assert resolve_index(biz) == index


def test_resolve_index_unknown_biz() -> None:
    with pytest.raises(UnknownBizError) as exc_info:
        resolve_index("video")
    assert exc_info.value.details == {"biz": "video"}


def test_decode_document_requires_object() -> None:
    assert decode_document('{"id": 1}') == {"id": 1}
    with pytest.raises(SyncDecodeError):
        decode_document("[1]")
    with pytest.raises(SyncDecodeError):
        decode_document("{broken")


async def test_apply_upserts_into_resolved_index(fake_store: FakeDocumentStore) -> None:
    service = IndexSyncService(fake_store)

    index = await service.apply(SyncEvent("pubCase", "5", '{"id": 5, "title": "a"}'))

    assert index == "pub_case_index"
    assert fake_store.documents["pub_case_index"]["5"] == {"id": 5, "title": "a"}


async def test_apply_is_idempotent_by_document_id(fake_store: FakeDocumentStore) -> None:
    service = IndexSyncService(fake_store)

    await service.apply(SyncEvent("skill", "1", '{"id": 1, "name": "old"}'))
    await service.apply(SyncEvent("skill", "1", '{"id": 1, "name": "new"}'))

    assert fake_store.documents["skill_index"] == {"1": {"id": 1, "name": "new"}}


async def test_unknown_biz_writes_nothing(fake_store: FakeDocumentStore) -> None:
    service = IndexSyncService(fake_store)

    with pytest.raises(UnknownBizError):
        await service.apply(SyncEvent("video", "1", "{}"))
    assert fake_store.index_calls == []


async def test_store_failure_raises_upsert_error() -> None:
    store = AsyncMock()
    store.index = AsyncMock(side_effect=RuntimeError("cluster red"))
    service = IndexSyncService(store)

    with pytest.raises(SyncUpsertError) as exc_info:
        await service.input("case_index", "3", '{"id": 3}')

    assert exc_info.value.details == {
        "index": "case_index",
        "doc_id": "3",
        "reason": "cluster red",
    }
