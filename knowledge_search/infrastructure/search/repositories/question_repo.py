"""Question search repository."""

from typing import Any

from knowledge_search.domain.entities import Answer, AnswerElement, Question
from knowledge_search.infrastructure.search.repositories.base import (
    ElasticSearchRepository,
    read_int,
    read_object,
    read_status,
    read_str,
    read_str_list,
    read_text,
    read_time,
)


def _answer_element(
    answer: dict[str, Any], tier: str, highlights: dict[str, list[str]]
) -> AnswerElement:
    source = read_object(answer, tier)
    return AnswerElement(
        id=read_int(source, "id"),
        content=read_text(
            source, "content", highlights, path=f"answer.{tier}.content"
        ),
        keywords=read_str(source, "keywords"),
        shorthand=read_str(source, "shorthand"),
        highlight=read_str(source, "highlight"),
        guidance=read_str(source, "guidance"),
    )


class QuestionSearchRepository(ElasticSearchRepository[Question]):
    """Search over question_index (admin) or pub_question_index (public)."""

    def _to_entity(
        self, source: dict[str, Any], highlights: dict[str, list[str]]
    ) -> Question:
        answer = read_object(source, "answer")
        return Question(
            id=read_int(source, "id"),
            uid=read_int(source, "uid"),
            title=read_str(source, "title"),
            content=read_text(source, "content", highlights),
            labels=read_str_list(source, "labels"),
            status=read_status(source),
            answer=Answer(
                analysis=_answer_element(answer, "analysis", highlights),
                basic=_answer_element(answer, "basic", highlights),
                intermediate=_answer_element(answer, "intermediate", highlights),
                advanced=_answer_element(answer, "advanced", highlights),
            ),
            utime=read_time(source, "utime"),
        )
