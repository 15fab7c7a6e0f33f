"""Core constants: index names, sync topic, and shared literal values.

Single source of truth for index naming (DRY). Used by the search
repositories, the index bootstrap, and the sync consumer's biz-to-index table.
"""

# Draft (admin) indices
CASE_INDEX = "case_index"
QUESTION_INDEX = "question_index"
SKILL_INDEX = "skill_index"
QUESTION_SET_INDEX = "question_set_index"

# Published indices (public readers)
PUB_CASE_INDEX = "pub_case_index"
PUB_QUESTION_INDEX = "pub_question_index"

# Sync event biz tags that target the published indices
PUB_CASE_BIZ = "pubCase"
PUB_QUESTION_BIZ = "pubQuestion"

# Fixed biz tag -> index table for the sync consumer.
SYNC_INDEX_TABLE: dict[str, str] = {
    "case": CASE_INDEX,
    PUB_CASE_BIZ: PUB_CASE_INDEX,
    "question": QUESTION_INDEX,
    PUB_QUESTION_BIZ: PUB_QUESTION_INDEX,
    "skill": SKILL_INDEX,
    "questionSet": QUESTION_SET_INDEX,
}

# Shared between producers (CRUD modules) and the consumer subscription.
SYNC_TOPIC = "sync_data_to_search"
SYNC_GROUP = "sync"

# Pagination
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
