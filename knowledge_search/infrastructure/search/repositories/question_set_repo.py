"""Question set search repository."""

from typing import Any

from knowledge_search.domain.entities import QuestionSet
from knowledge_search.infrastructure.search.repositories.base import (
    ElasticSearchRepository,
    read_int,
    read_int_list,
    read_str,
    read_text,
    read_time,
)


class QuestionSetSearchRepository(ElasticSearchRepository[QuestionSet]):
    """Search over question_set_index."""

    def _to_entity(
        self, source: dict[str, Any], highlights: dict[str, list[str]]
    ) -> QuestionSet:
        return QuestionSet(
            id=read_int(source, "id"),
            uid=read_int(source, "uid"),
            title=read_str(source, "title"),
            description=read_text(source, "description", highlights),
            questions=read_int_list(source, "questions"),
            utime=read_time(source, "utime"),
        )
