"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from knowledge_search.domain.entities import (
    Case,
    EsVal,
    Question,
    QuestionSet,
    SearchResult,
    Skill,
)
from knowledge_search.domain.enums import ALL_TARGET, Biz, PublishStatus, SearchView
from knowledge_search.domain.exceptions import (
    BootstrapError,
    HandlerError,
    ParseError,
    SearchException,
    SyncDecodeError,
    SyncUpsertError,
    UnknownBizError,
    UnknownTargetError,
)
from knowledge_search.domain.value_objects import QueryExpression, QueryTerm

__all__ = [
    # Entities
    "Case",
    "EsVal",
    "Question",
    "QuestionSet",
    "SearchResult",
    "Skill",
    # Enums
    "ALL_TARGET",
    "Biz",
    "PublishStatus",
    "SearchView",
    # Exceptions
    "BootstrapError",
    "HandlerError",
    "ParseError",
    "SearchException",
    "SyncDecodeError",
    "SyncUpsertError",
    "UnknownBizError",
    "UnknownTargetError",
    # Value objects
    "QueryExpression",
    "QueryTerm",
]
