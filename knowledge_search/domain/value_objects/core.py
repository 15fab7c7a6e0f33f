"""Core value objects for the search domain.

Immutable values produced by parsing a search expression and splitting
its keyword string into terms.
"""

from dataclasses import dataclass

TERM_SEPARATOR = " "
COLUMN_SEPARATOR = ":"


@dataclass(frozen=True)
class QueryExpression:
    """Parsed biz:<target>:<keywords> expression.

    target is a business tag or the 'all' sentinel. keywords is kept verbatim;
    query builders decide how to split and weight it.
    """

    target: str
    keywords: str


@dataclass(frozen=True)
class QueryTerm:
    """One keyword of a search, optionally restricted to a single column.

    column is None for a bare keyword, which is matched against every
    configured field.
    """

    keyword: str
    column: str | None = None

    @property
    def is_all(self) -> bool:
        return self.column is None


def split_terms(keywords: str) -> list[QueryTerm]:
    """Split a keyword string into terms.

    Terms are separated by single spaces; empty terms are skipped. A term of
    the form column:keyword targets only that column. Terms with more than
    one ':' are ambiguous and dropped.

    Args:
        keywords: Keyword part of a search expression.

    Returns:
        Terms in input order.
    """
    terms: list[QueryTerm] = []
    for raw in keywords.split(TERM_SEPARATOR):
        if not raw:
            continue
        parts = raw.split(COLUMN_SEPARATOR)
        if len(parts) == 1:
            terms.append(QueryTerm(keyword=parts[0]))
        elif len(parts) == 2 and parts[0] and parts[1]:
            terms.append(QueryTerm(keyword=parts[1], column=parts[0]))
    return terms
