"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from knowledge_search.domain.entities import Case, Question, QuestionSet, Skill

T_co = TypeVar("T_co", covariant=True)


# Document store interface
class IDocumentStore(Protocol):
    """Protocol for the external document store (search and index primitives)."""

    async def search(self, index: str, body: dict[str, Any]) -> list[dict[str, Any]]:
        """Run a search request body against index; return raw hits in relevance order."""

    async def index(self, index: str, doc_id: str, document: dict[str, Any]) -> None:
        """Index or overwrite document under doc_id (idempotent by id)."""

    async def index_exists(self, index: str) -> bool:
        """Return True if index exists."""

    async def create_index(self, index: str, body: dict[str, Any]) -> None:
        """Create index with the given settings and mappings."""

    async def close(self) -> None:
        """Release client resources."""


# Per-entity search repository interface
class IEntitySearchRepository(Protocol[T_co]):
    """Protocol for a per-entity query builder bound to one index."""

    async def search(self, keywords: str, offset: int, limit: int) -> list[T_co]:
        """Search keywords (weighted, highlighted); return records in relevance order."""


class ICaseSearchRepository(IEntitySearchRepository["Case"], Protocol):
    """Case search (title, labels, keywords, content, guidance)."""


class IQuestionSearchRepository(IEntitySearchRepository["Question"], Protocol):
    """Question search (title, labels, content, four answer tiers)."""


class ISkillSearchRepository(IEntitySearchRepository["Skill"], Protocol):
    """Skill search (name, labels, desc, three levels)."""


class IQuestionSetSearchRepository(IEntitySearchRepository["QuestionSet"], Protocol):
    """Question-set search (title, description)."""
