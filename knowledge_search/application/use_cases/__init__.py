"""Application use cases: one entry point per workflow."""

from knowledge_search.application.use_cases.search import (
    CaseSearchHandler,
    QuestionSearchHandler,
    QuestionSetSearchHandler,
    SearchService,
    SkillSearchHandler,
)
from knowledge_search.application.use_cases.sync import (
    IndexSyncService,
    decode_document,
    resolve_index,
)

__all__ = [
    "CaseSearchHandler",
    "IndexSyncService",
    "QuestionSearchHandler",
    "QuestionSetSearchHandler",
    "SearchService",
    "SkillSearchHandler",
    "decode_document",
    "resolve_index",
]
