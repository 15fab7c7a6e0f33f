"""Application services: search expression parsing."""

from knowledge_search.application.services.query_expression import (
    EXPRESSION_PREFIX,
    parse_expression,
)

__all__ = ["EXPRESSION_PREFIX", "parse_expression"]
