"""Search result aggregate.

Each handler returns its own partial SearchResult; the dispatch coordinator
merges them one by one after every handler has finished. Nothing writes to
a shared instance concurrently, so the aggregate carries no lock.
"""

from dataclasses import dataclass, field

from knowledge_search.domain.entities.documents import Case, Question, QuestionSet, Skill


@dataclass
class SearchResult:
    """Results of one search request, one collection per entity category."""

    cases: list[Case] = field(default_factory=list)
    questions: list[Question] = field(default_factory=list)
    skills: list[Skill] = field(default_factory=list)
    question_sets: list[QuestionSet] = field(default_factory=list)

    def merge(self, other: "SearchResult") -> None:
        """Append every collection of other onto this result."""
        self.cases.extend(other.cases)
        self.questions.extend(other.questions)
        self.skills.extend(other.skills)
        self.question_sets.extend(other.question_sets)

    def total(self) -> int:
        """Number of records across all collections."""
        return (
            len(self.cases)
            + len(self.questions)
            + len(self.skills)
            + len(self.question_sets)
        )
