"""SearchService: parse, route, concurrent fan-out and merge."""

import asyncio

import pytest

from knowledge_search.application.use_cases.search import SearchService
from knowledge_search.domain.entities import SearchResult
from knowledge_search.domain.enums import SearchView
from knowledge_search.domain.exceptions import HandlerError, ParseError, UnknownTargetError
from knowledge_search.infrastructure.search.factory import build_search_service
from tests.fakes import FakeDocumentStore
from tests.samples import case_doc, question_doc, question_set_doc, skill_doc


class StubHandler:
    """Handler returning a fixed result after an optional delay, or raising."""

    def __init__(self, biz: str, result: SearchResult | None = None, delay: float = 0, error: Exception | None = None) -> None:
        self.biz = biz
        self.result = result or SearchResult()
        self.delay = delay
        self.error = error
        self.calls: list[tuple[str, int, int]] = []
        self.started = asyncio.Event()
        self.cancelled = False

    async def search(self, keywords: str, offset: int, limit: int) -> SearchResult:
        self.calls.append((keywords, offset, limit))
        self.started.set()
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def seeded_store(fake_store: FakeDocumentStore) -> FakeDocumentStore:
    fake_store.add("pub_case_index", "1", case_doc(id=1))
    fake_store.add("case_index", "1", case_doc(id=1))
    fake_store.add("case_index", "2", case_doc(id=2, status=1))
    fake_store.add("pub_question_index", "1", question_doc(id=1, title="Redis question"))
    fake_store.add("question_index", "1", question_doc(id=1, title="Redis question"))
    fake_store.add("skill_index", "1", skill_doc(id=1))
    fake_store.add("question_set_index", "1", question_set_doc(id=1))
    return fake_store


async def test_all_searches_every_category(seeded_store: FakeDocumentStore) -> None:
    service = build_search_service(seeded_store, SearchView.PUBLIC)

    result = await service.search("biz:all:redis", 0, 20)

    assert [c.id for c in result.cases] == [1]
    assert [q.id for q in result.questions] == [1]
    assert [s.id for s in result.skills] == [1]
    assert [qs.id for qs in result.question_sets] == [1]
    searched = {index for index, _ in seeded_store.search_calls}
    assert searched == {"pub_case_index", "pub_question_index", "skill_index", "question_set_index"}


async def test_single_target_leaves_other_categories_empty(seeded_store: FakeDocumentStore) -> None:
    service = build_search_service(seeded_store, SearchView.PUBLIC)

    result = await service.search("biz:case:redis")

    assert [c.id for c in result.cases] == [1]
    assert result.questions == [] and result.skills == [] and result.question_sets == []
    assert [index for index, _ in seeded_store.search_calls] == ["pub_case_index"]


async def test_admin_view_reads_draft_indices_without_status_filter(
    seeded_store: FakeDocumentStore,
) -> None:
    service = build_search_service(seeded_store, SearchView.ADMIN)

    result = await service.search("biz:case:redis")

    assert [c.id for c in result.cases] == [1, 2]
    index, body = seeded_store.search_calls[-1]
    assert index == "case_index"
    assert body["query"]["bool"]["filter"] == []
    assert "highlight" not in body


async def test_public_view_filters_published(seeded_store: FakeDocumentStore) -> None:
    service = build_search_service(seeded_store, SearchView.PUBLIC)

    await service.search("biz:question:redis")

    index, body = seeded_store.search_calls[-1]
    assert index == "pub_question_index"
    assert body["query"]["bool"]["filter"] == [{"term": {"status": 2}}]


async def test_parse_error_propagates_unchanged() -> None:
    handler = StubHandler("case")
    service = SearchService([handler])

    with pytest.raises(ParseError):
        await service.search("case:redis")
    assert handler.calls == []


async def test_unknown_target_is_distinct_from_parse_error() -> None:
    service = SearchService([StubHandler("case")])

    with pytest.raises(UnknownTargetError) as exc_info:
        await service.search("biz:video:redis")
    assert exc_info.value.details == {"target": "video"}


async def test_handlers_run_concurrently() -> None:
    """Two slow handlers finish in roughly one delay, not two."""
    slow = [StubHandler("case", delay=0.2), StubHandler("skill", delay=0.2)]
    service = SearchService(slow)

    loop = asyncio.get_running_loop()
    started = loop.time()
    await service.search("biz:all:redis", 3, 7)
    elapsed = loop.time() - started

    assert elapsed < 0.35
    assert all(h.calls == [("redis", 3, 7)] for h in slow)


async def test_failure_fails_whole_search_and_cancels_siblings() -> None:
    failing = StubHandler("question", error=RuntimeError("store down"))
    slow = StubHandler("case", delay=5)
    service = SearchService([slow, failing])

    with pytest.raises(HandlerError) as exc_info:
        await service.search("biz:all:redis")

    assert exc_info.value.biz == "question"
    assert exc_info.value.details["reason"] == "store down"
    assert slow.cancelled


async def test_store_failure_becomes_handler_error(seeded_store: FakeDocumentStore) -> None:
    seeded_store.fail_search_on.add("skill_index")
    seeded_store.search_delay["pub_case_index"] = 5
    service = build_search_service(seeded_store, SearchView.PUBLIC)

    with pytest.raises(HandlerError) as exc_info:
        await service.search("biz:all:redis")

    assert exc_info.value.biz == "skill"
    assert exc_info.value.details["reason"] == "Document store search failed on skill_index"
    assert seeded_store.cancelled_searches == ["pub_case_index"]


async def test_caller_cancellation_cancels_handlers() -> None:
    slow = [StubHandler("case", delay=5), StubHandler("skill", delay=5)]
    service = SearchService(slow)

    task = asyncio.create_task(service.search("biz:all:redis"))
    await asyncio.gather(*(h.started.wait() for h in slow))
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert all(h.cancelled for h in slow)


async def test_results_are_deterministic(fake_store: FakeDocumentStore) -> None:
    store = fake_store
    store.add("skill_index", "1", skill_doc(id=1))
    store.add("skill_index", "2", skill_doc(id=2, name="Redis streams"))
    service = build_search_service(store, SearchView.ADMIN)

    first = await service.search("biz:all:redis")
    second = await service.search("biz:all:redis")

    assert [s.id for s in first.skills] == [s.id for s in second.skills]
    assert service.targets == ["case", "question", "skill", "questionSet"]


@pytest.mark.parametrize("delays", [(0.03, 0.0, 0.02, 0.01), (0.0, 0.03, 0.01, 0.02)])
async def test_merged_result_does_not_depend_on_finish_order(delays: tuple[float, ...]) -> None:
    case, question, skill, question_set = object(), object(), object(), object()
    handlers = [
        StubHandler("case", SearchResult(cases=[case]), delay=delays[0]),
        StubHandler("question", SearchResult(questions=[question]), delay=delays[1]),
        StubHandler("skill", SearchResult(skills=[skill]), delay=delays[2]),
        StubHandler("questionSet", SearchResult(question_sets=[question_set]), delay=delays[3]),
    ]
    service = SearchService(handlers)

    result = await service.search("biz:all:redis")

    assert result.cases == [case]
    assert result.questions == [question]
    assert result.skills == [skill]
    assert result.question_sets == [question_set]
    assert result.total() == 4
