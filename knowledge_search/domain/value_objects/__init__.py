"""Value objects: parsed search expressions and keyword terms."""

from knowledge_search.domain.value_objects.core import (
    QueryExpression,
    QueryTerm,
    split_terms,
)

__all__ = ["QueryExpression", "QueryTerm", "split_terms"]
