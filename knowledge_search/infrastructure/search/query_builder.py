"""Weighted multi-field query construction for the document store.

A search is a disjunction of per-field clauses (one per searched field)
wrapped in a single must, plus optional hard filters. Exact-term fields
use a terms clause; full-text fields use match. Highlighting is requested
only for fields that are both searched and configured to highlight.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from knowledge_search.domain.value_objects import QueryTerm


@dataclass(frozen=True)
class HighlightConfig:
    pre_tags: tuple[str, ...] = ("<strong>",)
    post_tags: tuple[str, ...] = ("</strong>",)
    fragment_size: int = 100
    number_of_fragments: int = 5


DEFAULT_HIGHLIGHT = HighlightConfig()


@dataclass(frozen=True)
class FieldConfig:
    """How one indexed field participates in a search.

    Attributes:
        name: Field path in the index mapping (e.g. answer.basic.content).
        boost: Relative weight; 0 leaves the store's default weight.
        is_term: Exact-term field (labels, biz) rather than full text.
        highlight: Highlight settings, or None to never highlight.
    """

    name: str
    boost: int = 0
    is_term: bool = False
    highlight: HighlightConfig | None = None


@dataclass
class _FieldTerms:
    config: FieldConfig
    keywords: list[str] = field(default_factory=list)


def _collect(fields: Sequence[FieldConfig], terms: Sequence[QueryTerm]) -> list[_FieldTerms]:
    """Group keywords by the fields they target, in field table order."""
    grouped = [_FieldTerms(config=f) for f in fields]
    for term in terms:
        for entry in grouped:
            if term.is_all or term.column == entry.config.name:
                entry.keywords.append(term.keyword)
    return [entry for entry in grouped if entry.keywords]


def _clause(entry: _FieldTerms) -> dict[str, Any]:
    cfg = entry.config
    if cfg.is_term:
        terms: dict[str, Any] = {cfg.name: list(entry.keywords)}
        if cfg.boost > 0:
            terms["boost"] = cfg.boost
        return {"terms": terms}
    match: dict[str, Any] = {"query": " ".join(entry.keywords)}
    if cfg.boost > 0:
        match["boost"] = cfg.boost
    return {"match": {cfg.name: match}}


def _highlight(entries: Sequence[_FieldTerms]) -> dict[str, Any] | None:
    highlighted = [e.config for e in entries if e.config.highlight is not None]
    if not highlighted:
        return None
    # Tags are per request; the first highlighted field decides them.
    tags = highlighted[0].highlight
    return {
        "pre_tags": list(tags.pre_tags),
        "post_tags": list(tags.post_tags),
        "fields": {
            cfg.name: {
                "fragment_size": cfg.highlight.fragment_size,
                "number_of_fragments": cfg.highlight.number_of_fragments,
            }
            for cfg in highlighted
        },
    }


def build_search_body(
    fields: Sequence[FieldConfig],
    terms: Sequence[QueryTerm],
    offset: int,
    limit: int,
    filters: Sequence[dict[str, Any]] = (),
) -> dict[str, Any] | None:
    """Build a search request body.

    Args:
        fields: Field table of the entity being searched.
        terms: Keywords split from the expression.
        offset: Hits to skip.
        limit: Maximum hits to return.
        filters: Hard filter clauses (must hold, do not affect scoring).

    Returns:
        Request body, or None when no term targets any configured field.
    """
    entries = _collect(fields, terms)
    if not entries:
        return None
    body: dict[str, Any] = {
        "query": {
            "bool": {
                "must": [{"bool": {"should": [_clause(e) for e in entries]}}],
                "filter": list(filters),
            }
        },
        "from": offset,
        "size": limit,
    }
    highlight = _highlight(entries)
    if highlight is not None:
        body["highlight"] = highlight
    return body


def parse_highlights(hit: dict[str, Any]) -> dict[str, list[str]]:
    """Return the highlight fragments of hit keyed by field path."""
    raw = hit.get("highlight") or {}
    return {name: list(fragments) for name, fragments in raw.items()}
