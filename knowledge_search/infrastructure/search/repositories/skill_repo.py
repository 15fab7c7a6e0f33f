"""Skill search repository."""

from typing import Any

from knowledge_search.domain.entities import Skill, SkillLevel
from knowledge_search.infrastructure.search.repositories.base import (
    ElasticSearchRepository,
    read_int,
    read_int_list,
    read_object,
    read_str,
    read_str_list,
    read_text,
    read_time,
)


def _level(
    source: dict[str, Any], level: str, highlights: dict[str, list[str]]
) -> SkillLevel:
    data = read_object(source, level)
    return SkillLevel(
        id=read_int(data, "id"),
        desc=read_text(data, "desc", highlights, path=f"{level}.desc"),
        questions=read_int_list(data, "questions"),
        cases=read_int_list(data, "cases"),
        ctime=read_time(data, "ctime"),
        utime=read_time(data, "utime"),
    )


class SkillSearchRepository(ElasticSearchRepository[Skill]):
    """Search over skill_index. Skills have no publication status."""

    def _to_entity(
        self, source: dict[str, Any], highlights: dict[str, list[str]]
    ) -> Skill:
        return Skill(
            id=read_int(source, "id"),
            name=read_str(source, "name"),
            desc=read_text(source, "desc", highlights),
            labels=read_str_list(source, "labels"),
            basic=_level(source, "basic", highlights),
            intermediate=_level(source, "intermediate", highlights),
            advanced=_level(source, "advanced", highlights),
            ctime=read_time(source, "ctime"),
            utime=read_time(source, "utime"),
        )
