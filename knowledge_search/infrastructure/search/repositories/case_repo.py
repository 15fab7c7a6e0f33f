"""Case search repository."""

from typing import Any

from knowledge_search.domain.entities import Case
from knowledge_search.infrastructure.search.repositories.base import (
    ElasticSearchRepository,
    read_int,
    read_status,
    read_str,
    read_str_list,
    read_text,
    read_time,
)


class CaseSearchRepository(ElasticSearchRepository[Case]):
    """Search over case_index (admin) or pub_case_index (public)."""

    def _to_entity(
        self, source: dict[str, Any], highlights: dict[str, list[str]]
    ) -> Case:
        return Case(
            id=read_int(source, "id"),
            uid=read_int(source, "uid"),
            title=read_str(source, "title"),
            content=read_text(source, "content", highlights),
            labels=read_str_list(source, "labels"),
            github_repo=read_str(source, "github_repo"),
            gitee_repo=read_str(source, "gitee_repo"),
            keywords=read_str(source, "keywords"),
            shorthand=read_str(source, "shorthand"),
            highlight=read_str(source, "highlight"),
            guidance=read_str(source, "guidance"),
            status=read_status(source),
            ctime=read_time(source, "ctime"),
            utime=read_time(source, "utime"),
        )
