"""Weighted multi-field query bodies and highlight parsing."""

from knowledge_search.domain.value_objects import QueryTerm, split_terms
from knowledge_search.infrastructure.search.query_builder import (
    DEFAULT_HIGHLIGHT,
    FieldConfig,
    HighlightConfig,
    build_search_body,
    parse_highlights,
)

FIELDS = (
    FieldConfig("title", 30),
    FieldConfig("labels", 29, is_term=True),
    FieldConfig("biz", is_term=True),
    FieldConfig("content", 2, highlight=DEFAULT_HIGHLIGHT),
)


def _should(body: dict) -> list[dict]:
    return body["query"]["bool"]["must"][0]["bool"]["should"]


def test_bare_terms_hit_every_field_in_table_order() -> None:
    body = build_search_body(FIELDS, split_terms("redis cache"), 0, 20)
    assert _should(body) == [
        {"match": {"title": {"query": "redis cache", "boost": 30}}},
        {"terms": {"labels": ["redis", "cache"], "boost": 29}},
        {"terms": {"biz": ["redis", "cache"]}},
        {"match": {"content": {"query": "redis cache", "boost": 2}}},
    ]
    assert body["from"] == 0
    assert body["size"] == 20
    assert body["query"]["bool"]["filter"] == []


def test_column_term_only_hits_named_column() -> None:
    body = build_search_body(FIELDS, [QueryTerm("redis", column="title")], 5, 10)
    assert _should(body) == [{"match": {"title": {"query": "redis", "boost": 30}}}]
    assert body["from"] == 5
    assert "highlight" not in body


def test_mixed_terms_accumulate_per_field() -> None:
    terms = [QueryTerm("redis", column="title"), QueryTerm("cache")]
    body = build_search_body(FIELDS, terms, 0, 20)
    title_clause = _should(body)[0]
    assert title_clause == {"match": {"title": {"query": "redis cache", "boost": 30}}}
    assert {"terms": {"labels": ["cache"], "boost": 29}} in _should(body)


def test_unknown_column_yields_no_body() -> None:
    assert build_search_body(FIELDS, [QueryTerm("x", column="nope")], 0, 20) is None


def test_filters_are_passed_through() -> None:
    status = {"term": {"status": 2}}
    body = build_search_body(FIELDS, split_terms("redis"), 0, 20, filters=(status,))
    assert body["query"]["bool"]["filter"] == [status]


def test_highlight_requests_only_searched_highlighted_fields() -> None:
    fields = FIELDS + (
        FieldConfig("guidance", 1, highlight=HighlightConfig(fragment_size=50)),
    )
    body = build_search_body(fields, [QueryTerm("redis", column="guidance")], 0, 20)
    assert body["highlight"]["fields"] == {
        "guidance": {"fragment_size": 50, "number_of_fragments": 5}
    }

    body = build_search_body(fields, split_terms("redis"), 0, 20)
    assert body["highlight"] == {
        "pre_tags": ["<strong>"],
        "post_tags": ["</strong>"],
        "fields": {
            "content": {"fragment_size": 100, "number_of_fragments": 5},
            "guidance": {"fragment_size": 50, "number_of_fragments": 5},
        },
    }


def test_parse_highlights() -> None:
    hit = {"highlight": {"content": ("a <strong>b</strong>",)}}
    assert parse_highlights(hit) == {"content": ["a <strong>b</strong>"]}
    assert parse_highlights({"_source": {}}) == {}
