"""Composition of the search registries for the public and admin views."""

from __future__ import annotations

from typing import TYPE_CHECKING

from knowledge_search.application.use_cases.search import (
    CaseSearchHandler,
    QuestionSearchHandler,
    QuestionSetSearchHandler,
    SearchService,
    SkillSearchHandler,
)
from knowledge_search.core.constants import (
    CASE_INDEX,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PUB_CASE_INDEX,
    PUB_QUESTION_INDEX,
    QUESTION_INDEX,
    QUESTION_SET_INDEX,
    SKILL_INDEX,
)
from knowledge_search.domain.enums import SearchView
from knowledge_search.infrastructure.search.field_configs import (
    ADMIN_CASE_FIELDS,
    ADMIN_QUESTION_FIELDS,
    PUBLIC_CASE_FIELDS,
    PUBLIC_QUESTION_FIELDS,
    QUESTION_SET_FIELDS,
    SKILL_FIELDS,
)
from knowledge_search.infrastructure.search.repositories import (
    PUBLISHED_FILTER,
    CaseSearchRepository,
    QuestionSearchRepository,
    QuestionSetSearchRepository,
    SkillSearchRepository,
)

if TYPE_CHECKING:
    from knowledge_search.application.interfaces.repositories import IDocumentStore


def build_search_service(
    store: IDocumentStore,
    view: SearchView = SearchView.PUBLIC,
    max_page_size: int = MAX_PAGE_SIZE,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> SearchService:
    """Build the biz -> handler registry for view.

    PUBLIC reads the published case and question indices, restricted to
    published documents, with highlighting. ADMIN reads the draft indices
    without a status filter or case/question highlighting. Skills and
    question sets have a single index shared by both views.
    """
    page = {"max_limit": max_page_size, "default_limit": default_page_size}
    if view == SearchView.PUBLIC:
        case_repo = CaseSearchRepository(
            store,
            PUB_CASE_INDEX,
            PUBLIC_CASE_FIELDS,
            filters=(PUBLISHED_FILTER,),
            **page,
        )
        question_repo = QuestionSearchRepository(
            store,
            PUB_QUESTION_INDEX,
            PUBLIC_QUESTION_FIELDS,
            filters=(PUBLISHED_FILTER,),
            **page,
        )
    else:
        case_repo = CaseSearchRepository(store, CASE_INDEX, ADMIN_CASE_FIELDS, **page)
        question_repo = QuestionSearchRepository(
            store, QUESTION_INDEX, ADMIN_QUESTION_FIELDS, **page
        )
    skill_repo = SkillSearchRepository(store, SKILL_INDEX, SKILL_FIELDS, **page)
    question_set_repo = QuestionSetSearchRepository(
        store, QUESTION_SET_INDEX, QUESTION_SET_FIELDS, **page
    )
    return SearchService(
        [
            CaseSearchHandler(case_repo),
            QuestionSearchHandler(question_repo),
            SkillSearchHandler(skill_repo),
            QuestionSetSearchHandler(question_set_repo),
        ]
    )
