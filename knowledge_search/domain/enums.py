"""Domain enumerations for the search subsystem.

Enums represent fixed sets of domain values (business tags, publication status).
"""

from enum import Enum, IntEnum


class Biz(str, Enum):
    """Business tag identifying a searchable entity category.

    Used as the search target in expressions and as the tag on sync events.
    """

    CASE = "case"
    QUESTION = "question"
    SKILL = "skill"
    QUESTION_SET = "questionSet"

    @classmethod
    def values(cls) -> list[str]:
        """Return all business tags as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [biz.value for biz in cls]


# Sentinel search target: fan out to every registered handler.
ALL_TARGET = "all"


class PublishStatus(IntEnum):
    """Publication status stored on case and question documents."""

    UNKNOWN = 0
    UNPUBLISHED = 1
    PUBLISHED = 2


class SearchView(str, Enum):
    """Which world a search reads from.

    PUBLIC reads the published indices shown to end users; ADMIN reads the
    draft indices used by creators before publication.
    """

    PUBLIC = "public"
    ADMIN = "admin"
