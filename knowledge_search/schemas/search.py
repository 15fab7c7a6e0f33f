"""Search API schemas.

Two response shapes over the same SearchResult: a compact list for end
users (one description line per hit) and the full entities for admins,
with every highlighted text field wrapped as {val, highlights}.
"""

from pydantic import BaseModel, ConfigDict, Field

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
from knowledge_search.shared.utils.datetime import format_display

DESCRIPTION_SEPARATOR = "<br/>"


class SearchRequest(BaseModel):
    """Request body for both search endpoints.

    keywords is the full expression, e.g. 'biz:all:redis cache'.
    """

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=0, description="0 means the default page size")
    keywords: str = Field(..., min_length=1, max_length=500)


# ---- Compact (public) view ----


class CompactItem(BaseModel):
    """One hit in the compact view."""

    id: int
    title: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    date: str = ""


class CompactSearchResponse(BaseModel):
    """Compact results keyed by entity category."""

    model_config = ConfigDict(populate_by_name=True)

    cases: list[CompactItem] = Field(default_factory=list)
    questions: list[CompactItem] = Field(default_factory=list)
    skills: list[CompactItem] = Field(default_factory=list)
    question_set: list[CompactItem] = Field(default_factory=list, alias="questionSet")


def _labelled(fields: list[tuple[str, EsVal]], fallback: EsVal) -> str:
    """Join 'Label: first highlight' for each highlighted field.

    Falls back to the truncated fallback value when nothing was highlighted.
    """
    parts = [
        f"{label}: {val.highlights[0]}{DESCRIPTION_SEPARATOR}"
        for label, val in fields
        if val.highlights
    ]
    if parts:
        return "".join(parts).strip()
    return fallback.preview()


def compact_case(case: Case) -> CompactItem:
    return CompactItem(
        id=case.id,
        title=case.title,
        description=case.content.preview(),
        tags=list(case.labels),
        date=format_display(case.utime),
    )


def compact_question(question: Question) -> CompactItem:
    answer = question.answer
    description = _labelled(
        [
            ("Description", question.content),
            ("Analysis", answer.analysis.content),
            ("Basic", answer.basic.content),
            ("Intermediate", answer.intermediate.content),
            ("Advanced", answer.advanced.content),
        ],
        question.content,
    )
    return CompactItem(
        id=question.id,
        title=question.title,
        description=description,
        tags=list(question.labels),
        date=format_display(question.utime),
    )


def compact_skill(skill: Skill) -> CompactItem:
    description = _labelled(
        [
            ("Description", skill.desc),
            ("Basic", skill.basic.desc),
            ("Intermediate", skill.intermediate.desc),
            ("Advanced", skill.advanced.desc),
        ],
        skill.desc,
    )
    return CompactItem(
        id=skill.id,
        title=skill.name,
        description=description,
        tags=list(skill.labels),
        date=format_display(skill.utime),
    )


def compact_question_set(qs: QuestionSet) -> CompactItem:
    return CompactItem(
        id=qs.id,
        title=qs.title,
        description=qs.description.preview(),
        date=format_display(qs.utime),
    )


def to_compact_response(result: SearchResult) -> CompactSearchResponse:
    """Build the compact view of result."""
    return CompactSearchResponse(
        cases=[compact_case(c) for c in result.cases],
        questions=[compact_question(q) for q in result.questions],
        skills=[compact_skill(s) for s in result.skills],
        question_set=[compact_question_set(qs) for qs in result.question_sets],
    )


# ---- Full (admin) view ----


class EsValResponse(BaseModel):
    val: str = ""
    highlights: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, value: EsVal) -> "EsValResponse":
        return cls(val=value.value, highlights=list(value.highlights))


class CaseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    uid: int
    labels: list[str] = Field(default_factory=list)
    title: str
    content: EsValResponse
    github_repo: str = Field(default="", alias="githubRepo")
    gitee_repo: str = Field(default="", alias="giteeRepo")
    keywords: str = ""
    shorthand: str = ""
    highlight: str = ""
    guidance: str = ""
    status: int = 0
    ctime: str = ""
    utime: str = ""

    @classmethod
    def from_domain(cls, case: Case) -> "CaseResponse":
        return cls(
            id=case.id,
            uid=case.uid,
            labels=list(case.labels),
            title=case.title,
            content=EsValResponse.from_domain(case.content),
            github_repo=case.github_repo,
            gitee_repo=case.gitee_repo,
            keywords=case.keywords,
            shorthand=case.shorthand,
            highlight=case.highlight,
            guidance=case.guidance,
            status=int(case.status),
            ctime=format_display(case.ctime),
            utime=format_display(case.utime),
        )


class AnswerElementResponse(BaseModel):
    id: int = 0
    content: EsValResponse = Field(default_factory=EsValResponse)
    keywords: str = ""
    shorthand: str = ""
    highlight: str = ""
    guidance: str = ""

    @classmethod
    def from_domain(cls, element: AnswerElement) -> "AnswerElementResponse":
        return cls(
            id=element.id,
            content=EsValResponse.from_domain(element.content),
            keywords=element.keywords,
            shorthand=element.shorthand,
            highlight=element.highlight,
            guidance=element.guidance,
        )


class AnswerResponse(BaseModel):
    analysis: AnswerElementResponse
    basic: AnswerElementResponse
    intermediate: AnswerElementResponse
    advanced: AnswerElementResponse

    @classmethod
    def from_domain(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            analysis=AnswerElementResponse.from_domain(answer.analysis),
            basic=AnswerElementResponse.from_domain(answer.basic),
            intermediate=AnswerElementResponse.from_domain(answer.intermediate),
            advanced=AnswerElementResponse.from_domain(answer.advanced),
        )


class QuestionResponse(BaseModel):
    id: int
    uid: int
    title: str
    labels: list[str] = Field(default_factory=list)
    content: EsValResponse
    status: int = 0
    answer: AnswerResponse
    utime: str = ""

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id,
            uid=question.uid,
            title=question.title,
            labels=list(question.labels),
            content=EsValResponse.from_domain(question.content),
            status=int(question.status),
            answer=AnswerResponse.from_domain(question.answer),
            utime=format_display(question.utime),
        )


class SkillLevelResponse(BaseModel):
    id: int = 0
    desc: EsValResponse = Field(default_factory=EsValResponse)
    questions: list[int] = Field(default_factory=list)
    cases: list[int] = Field(default_factory=list)
    ctime: str = ""
    utime: str = ""

    @classmethod
    def from_domain(cls, level: SkillLevel) -> "SkillLevelResponse":
        return cls(
            id=level.id,
            desc=EsValResponse.from_domain(level.desc),
            questions=list(level.questions),
            cases=list(level.cases),
            ctime=format_display(level.ctime),
            utime=format_display(level.utime),
        )


class SkillResponse(BaseModel):
    id: int
    labels: list[str] = Field(default_factory=list)
    name: str
    desc: EsValResponse
    basic: SkillLevelResponse
    intermediate: SkillLevelResponse
    advanced: SkillLevelResponse
    ctime: str = ""
    utime: str = ""

    @classmethod
    def from_domain(cls, skill: Skill) -> "SkillResponse":
        return cls(
            id=skill.id,
            labels=list(skill.labels),
            name=skill.name,
            desc=EsValResponse.from_domain(skill.desc),
            basic=SkillLevelResponse.from_domain(skill.basic),
            intermediate=SkillLevelResponse.from_domain(skill.intermediate),
            advanced=SkillLevelResponse.from_domain(skill.advanced),
            ctime=format_display(skill.ctime),
            utime=format_display(skill.utime),
        )


class QuestionSetResponse(BaseModel):
    id: int
    uid: int
    title: str
    description: EsValResponse
    questions: list[int] = Field(default_factory=list)
    utime: str = ""

    @classmethod
    def from_domain(cls, qs: QuestionSet) -> "QuestionSetResponse":
        return cls(
            id=qs.id,
            uid=qs.uid,
            title=qs.title,
            description=EsValResponse.from_domain(qs.description),
            questions=list(qs.questions),
            utime=format_display(qs.utime),
        )


class SearchResponse(BaseModel):
    """Full entities keyed by entity category (admin view)."""

    model_config = ConfigDict(populate_by_name=True)

    cases: list[CaseResponse] = Field(default_factory=list)
    questions: list[QuestionResponse] = Field(default_factory=list)
    skills: list[SkillResponse] = Field(default_factory=list)
    question_set: list[QuestionSetResponse] = Field(
        default_factory=list, alias="questionSet"
    )

    @classmethod
    def from_domain(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            cases=[CaseResponse.from_domain(c) for c in result.cases],
            questions=[QuestionResponse.from_domain(q) for q in result.questions],
            skills=[SkillResponse.from_domain(s) for s in result.skills],
            question_set=[
                QuestionSetResponse.from_domain(qs) for qs in result.question_sets
            ],
        )
