"""Compact and full response builders."""

from datetime import UTC, datetime

from knowledge_search.domain.entities import (
    Answer,
    AnswerElement,
    Case,
    EsVal,
    Question,
    QuestionSet,
    SearchResult,
    Skill,
    SkillLevel,
)
from knowledge_search.domain.enums import PublishStatus
from knowledge_search.schemas.search import (
    SearchResponse,
    compact_case,
    compact_question,
    compact_question_set,
    compact_skill,
    to_compact_response,
)

UTIME = datetime(2024, 5, 1, 8, 30, tzinfo=UTC)


def test_compact_case_prefers_first_highlight() -> None:
    case = Case(
        id=1,
        uid=2,
        title="Redis",
        content=EsVal("long content", ["<strong>long</strong> content", "second"]),
        labels=["redis"],
        utime=UTIME,
    )
    item = compact_case(case)
    assert item.description == "<strong>long</strong> content"
    assert item.tags == ["redis"]
    assert item.date == "2024-05-01 08:30:00"


def test_compact_case_truncates_without_highlight() -> None:
    case = Case(id=1, uid=2, title="Redis", content=EsVal("x" * 150))
    item = compact_case(case)
    assert item.description == "x" * 100
    assert item.date == ""


def test_compact_question_labels_each_highlighted_field() -> None:
    question = Question(
        id=3,
        uid=1,
        title="Stampede",
        content=EsVal("what is it", ["what is <strong>it</strong>"]),
        answer=Answer(
            basic=AnswerElement(content=EsVal("use a lock", ["use a <strong>lock</strong>"])),
        ),
    )
    item = compact_question(question)
    assert item.description == (
        "Description: what is <strong>it</strong><br/>"
        "Basic: use a <strong>lock</strong><br/>"
    )


def test_compact_question_falls_back_to_content() -> None:
    question = Question(id=3, uid=1, title="Stampede", content=EsVal("plain content"))
    assert compact_question(question).description == "plain content"


def test_compact_skill_uses_level_highlights_and_name_as_title() -> None:
    skill = Skill(
        id=5,
        name="Redis",
        desc=EsVal("kv store"),
        advanced=SkillLevel(desc=EsVal("cluster", ["<strong>cluster</strong>"])),
    )
    item = compact_skill(skill)
    assert item.title == "Redis"
    assert item.description == "Advanced: <strong>cluster</strong><br/>"


def test_compact_question_set_has_no_tags() -> None:
    qs = QuestionSet(id=9, uid=1, title="Set", description=EsVal("about redis"))
    item = compact_question_set(qs)
    assert item.tags == []
    assert item.description == "about redis"


def test_compact_response_serializes_question_set_key() -> None:
    result = SearchResult(
        question_sets=[QuestionSet(id=9, uid=1, title="Set", description=EsVal("d"))]
    )
    data = to_compact_response(result).model_dump(by_alias=True)
    assert set(data) == {"cases", "questions", "skills", "questionSet"}
    assert data["questionSet"][0]["id"] == 9


def test_full_response_wraps_text_fields() -> None:
    case = Case(
        id=1,
        uid=2,
        title="Redis",
        content=EsVal("c", ["<strong>c</strong>"]),
        github_repo="https://github.com/x/y",
        status=PublishStatus.PUBLISHED,
        ctime=UTIME,
        utime=UTIME,
    )
    data = SearchResponse.from_domain(SearchResult(cases=[case])).model_dump(by_alias=True)
    out = data["cases"][0]
    assert out["content"] == {"val": "c", "highlights": ["<strong>c</strong>"]}
    assert out["githubRepo"] == "https://github.com/x/y"
    assert out["status"] == 2
    assert out["ctime"] == "2024-05-01 08:30:00"
