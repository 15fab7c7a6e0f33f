"""Domain entities: indexed entity records and the search result aggregate."""

from knowledge_search.domain.entities.documents import (
    Answer,
    AnswerElement,
    Case,
    EsVal,
    Question,
    QuestionSet,
    Skill,
    SkillLevel,
)
from knowledge_search.domain.entities.result import SearchResult

__all__ = [
    "Answer",
    "AnswerElement",
    "Case",
    "EsVal",
    "Question",
    "QuestionSet",
    "SearchResult",
    "Skill",
    "SkillLevel",
]
