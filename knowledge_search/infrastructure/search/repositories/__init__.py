"""Per-entity search repositories over the document store."""

from knowledge_search.infrastructure.search.repositories.base import (
    PUBLISHED_FILTER,
    ElasticSearchRepository,
    normalize_page,
)
from knowledge_search.infrastructure.search.repositories.case_repo import (
    CaseSearchRepository,
)
from knowledge_search.infrastructure.search.repositories.question_repo import (
    QuestionSearchRepository,
)
from knowledge_search.infrastructure.search.repositories.question_set_repo import (
    QuestionSetSearchRepository,
)
from knowledge_search.infrastructure.search.repositories.skill_repo import (
    SkillSearchRepository,
)

__all__ = [
    "PUBLISHED_FILTER",
    "CaseSearchRepository",
    "ElasticSearchRepository",
    "QuestionSearchRepository",
    "QuestionSetSearchRepository",
    "SkillSearchRepository",
    "normalize_page",
]
