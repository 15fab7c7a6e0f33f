"""Searchable entity records.

Read-only projections of business records as they are indexed in the
document store. Created and overwritten only by the index sync consumer;
the search path reads them and never mutates them.
"""

from dataclasses import dataclass, field
from datetime import datetime

from knowledge_search.domain.enums import PublishStatus

PREVIEW_MAX_LENGTH = 100


def truncate(value: str, max_len: int = PREVIEW_MAX_LENGTH) -> str:
    """Return value cut to at most max_len characters."""
    if len(value) <= max_len:
        return value
    return value[:max_len]


@dataclass(frozen=True)
class EsVal:
    """Text field value with the highlighted fragments the store returned.

    highlights is empty unless the field is configured for highlighting
    and the store actually produced fragments for this hit.
    """

    value: str = ""
    highlights: list[str] = field(default_factory=list)

    def preview(self, max_len: int = PREVIEW_MAX_LENGTH) -> str:
        """First highlighted fragment, or the value truncated to max_len."""
        if self.highlights:
            return self.highlights[0]
        return truncate(self.value, max_len)


@dataclass(frozen=True)
class Case:
    id: int
    uid: int
    title: str
    content: EsVal
    labels: list[str] = field(default_factory=list)
    github_repo: str = ""
    gitee_repo: str = ""
    keywords: str = ""
    shorthand: str = ""
    highlight: str = ""
    guidance: str = ""
    status: PublishStatus = PublishStatus.UNKNOWN
    ctime: datetime | None = None
    utime: datetime | None = None


@dataclass(frozen=True)
class AnswerElement:
    """One difficulty tier of a question's answer."""

    id: int = 0
    content: EsVal = field(default_factory=EsVal)
    keywords: str = ""
    shorthand: str = ""
    highlight: str = ""
    guidance: str = ""


@dataclass(frozen=True)
class Answer:
    analysis: AnswerElement = field(default_factory=AnswerElement)
    basic: AnswerElement = field(default_factory=AnswerElement)
    intermediate: AnswerElement = field(default_factory=AnswerElement)
    advanced: AnswerElement = field(default_factory=AnswerElement)


@dataclass(frozen=True)
class Question:
    id: int
    uid: int
    title: str
    content: EsVal
    labels: list[str] = field(default_factory=list)
    status: PublishStatus = PublishStatus.UNKNOWN
    answer: Answer = field(default_factory=Answer)
    utime: datetime | None = None


@dataclass(frozen=True)
class SkillLevel:
    """One level of a skill; references the questions and cases that cover it."""

    id: int = 0
    desc: EsVal = field(default_factory=EsVal)
    questions: list[int] = field(default_factory=list)
    cases: list[int] = field(default_factory=list)
    ctime: datetime | None = None
    utime: datetime | None = None


@dataclass(frozen=True)
class Skill:
    id: int
    name: str
    desc: EsVal
    labels: list[str] = field(default_factory=list)
    basic: SkillLevel = field(default_factory=SkillLevel)
    intermediate: SkillLevel = field(default_factory=SkillLevel)
    advanced: SkillLevel = field(default_factory=SkillLevel)
    ctime: datetime | None = None
    utime: datetime | None = None


@dataclass(frozen=True)
class QuestionSet:
    id: int
    uid: int
    title: str
    description: EsVal
    questions: list[int] = field(default_factory=list)
    utime: datetime | None = None
