"""Field weighting tables for the public and admin views."""

from knowledge_search.infrastructure.search.field_configs import (
    ADMIN_CASE_FIELDS,
    ADMIN_QUESTION_FIELDS,
    PUBLIC_CASE_FIELDS,
    PUBLIC_QUESTION_FIELDS,
    QUESTION_SET_FIELDS,
    SKILL_FIELDS,
)


def _by_name(fields) -> dict:
    return {f.name: f for f in fields}


def test_case_weights() -> None:
    fields = _by_name(PUBLIC_CASE_FIELDS)
    assert fields["title"].boost == 30
    assert fields["labels"].boost == 29 and fields["labels"].is_term
    assert fields["keywords"].boost == 3
    assert fields["shorthand"].boost == 3
    assert fields["content"].boost == 2
    assert fields["guidance"].boost == 1
    assert fields["biz"].is_term


def test_public_tables_highlight_long_text_admin_tables_do_not() -> None:
    public_case = _by_name(PUBLIC_CASE_FIELDS)
    assert public_case["content"].highlight is not None
    assert public_case["guidance"].highlight is not None
    assert public_case["title"].highlight is None
    assert all(f.highlight is None for f in ADMIN_CASE_FIELDS)
    assert all(f.highlight is None for f in ADMIN_QUESTION_FIELDS)

    public_question = _by_name(PUBLIC_QUESTION_FIELDS)
    for tier in ("analysis", "basic", "intermediate", "advanced"):
        assert public_question[f"answer.{tier}.content"].highlight is not None
        assert public_question[f"answer.{tier}.keywords"].highlight is None


def test_admin_and_public_search_the_same_fields_with_same_weights() -> None:
    assert [(f.name, f.boost) for f in ADMIN_CASE_FIELDS] == [
        (f.name, f.boost) for f in PUBLIC_CASE_FIELDS
    ]
    assert [(f.name, f.boost) for f in ADMIN_QUESTION_FIELDS] == [
        (f.name, f.boost) for f in PUBLIC_QUESTION_FIELDS
    ]


def test_skill_and_question_set_tables() -> None:
    skill = _by_name(SKILL_FIELDS)
    assert skill["name"].boost == 30
    assert skill["labels"].boost == 6
    assert skill["desc"].boost == 2
    assert skill["advanced.desc"].highlight is not None

    question_set = _by_name(QUESTION_SET_FIELDS)
    assert question_set["title"].boost == 20
    assert question_set["description"].boost == 2
    assert question_set["description"].highlight is not None
