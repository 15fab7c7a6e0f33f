"""Field weighting tables per entity and view.

Weights decide relative ranking within one entity's results: a title
match on a case (30) always outranks a guidance-only match (1). The
published (public) tables request highlighting on long-text fields; the
admin tables search the same fields with the same weights but never
highlight cases or questions.
"""

from knowledge_search.infrastructure.search.query_builder import (
    DEFAULT_HIGHLIGHT,
    FieldConfig,
)

CASE_TITLE_BOOST = 30
CASE_LABEL_BOOST = 29
CASE_KEYWORDS_BOOST = 3
CASE_CONTENT_BOOST = 2
CASE_GUIDANCE_BOOST = 1

QUESTION_TITLE_BOOST = 11
QUESTION_LABEL_BOOST = 10
QUESTION_CONTENT_BOOST = 2

SKILL_NAME_BOOST = 30
SKILL_LABEL_BOOST = 6
SKILL_DESC_BOOST = 2

QUESTION_SET_TITLE_BOOST = 20
QUESTION_SET_DESCRIPTION_BOOST = 2

ANSWER_TIERS = ("analysis", "basic", "intermediate", "advanced")
SKILL_LEVELS = ("basic", "intermediate", "advanced")


def _case_fields(highlight: bool) -> tuple[FieldConfig, ...]:
    hl = DEFAULT_HIGHLIGHT if highlight else None
    return (
        FieldConfig("title", CASE_TITLE_BOOST),
        FieldConfig("labels", CASE_LABEL_BOOST, is_term=True),
        FieldConfig("biz", is_term=True),
        FieldConfig("keywords", CASE_KEYWORDS_BOOST),
        FieldConfig("shorthand", CASE_KEYWORDS_BOOST),
        FieldConfig("content", CASE_CONTENT_BOOST, highlight=hl),
        # Case keeps guidance as plain text; its fragments are requested but not mapped.
        FieldConfig("guidance", CASE_GUIDANCE_BOOST, highlight=hl),
    )


def _question_fields(highlight: bool) -> tuple[FieldConfig, ...]:
    hl = DEFAULT_HIGHLIGHT if highlight else None
    fields = [
        FieldConfig("title", QUESTION_TITLE_BOOST),
        FieldConfig("labels", QUESTION_LABEL_BOOST, is_term=True),
        FieldConfig("biz", is_term=True),
        FieldConfig("content", QUESTION_CONTENT_BOOST, highlight=hl),
    ]
    for tier in ANSWER_TIERS:
        prefix = f"answer.{tier}"
        fields.extend(
            (
                FieldConfig(f"{prefix}.keywords"),
                FieldConfig(f"{prefix}.shorthand"),
                FieldConfig(f"{prefix}.highlight"),
                FieldConfig(f"{prefix}.guidance"),
                FieldConfig(f"{prefix}.content", highlight=hl),
            )
        )
    return tuple(fields)


SKILL_FIELDS: tuple[FieldConfig, ...] = (
    FieldConfig("name", SKILL_NAME_BOOST),
    FieldConfig("labels", SKILL_LABEL_BOOST, is_term=True),
    FieldConfig("desc", SKILL_DESC_BOOST, highlight=DEFAULT_HIGHLIGHT),
    *(
        FieldConfig(f"{level}.desc", highlight=DEFAULT_HIGHLIGHT)
        for level in SKILL_LEVELS
    ),
)

QUESTION_SET_FIELDS: tuple[FieldConfig, ...] = (
    FieldConfig("title", QUESTION_SET_TITLE_BOOST),
    FieldConfig(
        "description", QUESTION_SET_DESCRIPTION_BOOST, highlight=DEFAULT_HIGHLIGHT
    ),
    FieldConfig("biz", is_term=True),
)

PUBLIC_CASE_FIELDS = _case_fields(highlight=True)
ADMIN_CASE_FIELDS = _case_fields(highlight=False)
PUBLIC_QUESTION_FIELDS = _question_fields(highlight=True)
ADMIN_QUESTION_FIELDS = _question_fields(highlight=False)
