"""Search expression parser: the single validation gate of the search path."""

from knowledge_search.domain.exceptions import ParseError
from knowledge_search.domain.value_objects import QueryExpression

EXPRESSION_PREFIX = "biz"
_SEPARATOR = ":"
_PARTS = 3


def parse_expression(expr: str) -> QueryExpression:
    """Parse biz:<target>:<keywords> into target and keywords.

    Splits on ':' into at most three parts, so keywords may themselves
    contain ':' (column-qualified terms such as title:redis). No trimming
    or case-folding is applied.

    Args:
        expr: Raw search expression from the caller.

    Returns:
        QueryExpression with target and verbatim keywords.

    Raises:
        ParseError: If there are fewer than three parts or the first part
            is not exactly 'biz'.
    """
    parts = expr.split(_SEPARATOR, _PARTS - 1)
    if len(parts) != _PARTS or parts[0] != EXPRESSION_PREFIX:
        raise ParseError(expr)
    return QueryExpression(target=parts[1], keywords=parts[2])
