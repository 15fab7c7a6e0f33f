"""Search dispatch: fan one expression out to per-entity handlers and merge results."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import TYPE_CHECKING

from knowledge_search.application.services import parse_expression
from knowledge_search.domain.entities import SearchResult
from knowledge_search.domain.enums import ALL_TARGET, Biz
from knowledge_search.domain.exceptions import (
    HandlerError,
    ParseError,
    SearchException,
    UnknownTargetError,
)
from knowledge_search.shared.telemetry.logging import get_logger
from knowledge_search.shared.telemetry.tracing import TracedOperation, add_span_attributes

if TYPE_CHECKING:
    from knowledge_search.application.interfaces.repositories import (
        ICaseSearchRepository,
        IQuestionSearchRepository,
        IQuestionSetSearchRepository,
        ISkillSearchRepository,
    )
    from knowledge_search.application.interfaces.services import ISearchHandler

logger = get_logger(__name__)


class CaseSearchHandler:
    """Search handler for cases."""

    biz = Biz.CASE.value

    def __init__(self, repo: ICaseSearchRepository) -> None:
        self.repo = repo

    async def search(self, keywords: str, offset: int, limit: int) -> SearchResult:
        return SearchResult(cases=await self.repo.search(keywords, offset, limit))


class QuestionSearchHandler:
    """Search handler for questions."""

    biz = Biz.QUESTION.value

    def __init__(self, repo: IQuestionSearchRepository) -> None:
        self.repo = repo

    async def search(self, keywords: str, offset: int, limit: int) -> SearchResult:
        return SearchResult(questions=await self.repo.search(keywords, offset, limit))


class SkillSearchHandler:
    """Search handler for skills."""

    biz = Biz.SKILL.value

    def __init__(self, repo: ISkillSearchRepository) -> None:
        self.repo = repo

    async def search(self, keywords: str, offset: int, limit: int) -> SearchResult:
        return SearchResult(skills=await self.repo.search(keywords, offset, limit))


class QuestionSetSearchHandler:
    """Search handler for question sets."""

    biz = Biz.QUESTION_SET.value

    def __init__(self, repo: IQuestionSetSearchRepository) -> None:
        self.repo = repo

    async def search(self, keywords: str, offset: int, limit: int) -> SearchResult:
        return SearchResult(
            question_sets=await self.repo.search(keywords, offset, limit)
        )


class SearchService:
    """Cross-entity search over a fixed biz -> handler registry.

    The registry is built once at startup and never mutated, so concurrent
    requests read it without coordination. Handlers for one request run as
    sibling asyncio tasks; each returns its own partial result and the
    coordinator merges them after the last one finishes. The first failure
    cancels every sibling and fails the whole request.
    """

    def __init__(self, handlers: Iterable[ISearchHandler]) -> None:
        self._handlers: dict[str, ISearchHandler] = {h.biz: h for h in handlers}

    @property
    def targets(self) -> list[str]:
        """Registered business tags."""
        return list(self._handlers)

    async def search(self, expr: str, offset: int = 0, limit: int = 20) -> SearchResult:
        """Parse expr and search the target it names.

        Args:
            expr: Expression of the form biz:<target>:<keywords>.
            offset: Records to skip per category.
            limit: Maximum records per category.

        Returns:
            Aggregated result; categories that were not searched are empty.

        Raises:
            ParseError: If expr is malformed.
            UnknownTargetError: If the target has no registered handler.
            HandlerError: If any handler failed.
        """
        query = parse_expression(expr)
        if query.target == ALL_TARGET:
            handlers = list(self._handlers.values())
        else:
            handler = self._handlers.get(query.target)
            if handler is None:
                raise UnknownTargetError(query.target)
            handlers = [handler]

        async with TracedOperation(
            "search.dispatch",
            {"search.target": query.target, "search.handlers": len(handlers)},
        ):
            return await self._run(handlers, query.keywords, offset, limit)

    async def _run(
        self,
        handlers: list[ISearchHandler],
        keywords: str,
        offset: int,
        limit: int,
    ) -> SearchResult:
        tasks: dict[asyncio.Task[SearchResult], str] = {
            asyncio.create_task(h.search(keywords, offset, limit)): h.biz
            for h in handlers
        }
        try:
            done, pending = await asyncio.wait(
                tasks, return_when=asyncio.FIRST_EXCEPTION
            )
        except asyncio.CancelledError:
            # Caller gave up (request timeout or disconnect).
            await _cancel_all(tasks)
            raise

        failed = next((t for t in done if t.exception() is not None), None)
        if failed is not None:
            await _cancel_all(pending)
            biz = tasks[failed]
            exc = failed.exception()
            logger.warning("Search handler %s failed: %s", biz, exc)
            if isinstance(exc, (HandlerError, ParseError, UnknownTargetError)):
                raise exc
            if isinstance(exc, SearchException):
                raise HandlerError(biz, exc.message) from exc
            raise HandlerError(biz, str(exc)) from exc

        result = SearchResult()
        # Merge in registry order so collections are deterministic.
        for task in tasks:
            result.merge(task.result())
        add_span_attributes(**{"search.results": result.total()})
        return result


async def _cancel_all(tasks: Iterable[asyncio.Task[SearchResult]]) -> None:
    """Cancel tasks and wait until each has actually finished."""
    tasks = list(tasks)
    for task in tasks:
        task.cancel()
    if tasks:
        await asyncio.gather(*tasks, return_exceptions=True)
