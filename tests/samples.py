"""Sample index documents shaped like the sync producers write them."""

from typing import Any

# 2024-05-01 08:30:00 UTC
UTIME_MS = 1714552200000


def case_doc(
    id: int = 1,
    title: str = "Redis cache stampede",
    content: str = "How a hot key expiring floods the database",
    labels: list[str] | None = None,
    status: int = 2,
    **extra: Any,
) -> dict[str, Any]:
    doc = {
        "id": id,
        "uid": 7,
        "title": title,
        "content": content,
        "labels": labels if labels is not None else ["redis"],
        "github_repo": "https://github.com/example/cases",
        "gitee_repo": "",
        "keywords": "cache",
        "shorthand": "stampede",
        "highlight": "",
        "guidance": "Use a mutex or early refresh",
        "status": status,
        "ctime": UTIME_MS,
        "utime": UTIME_MS,
    }
    doc.update(extra)
    return doc


def question_doc(
    id: int = 1,
    title: str = "What is a cache stampede",
    content: str = "Explain the stampede problem",
    status: int = 2,
    **extra: Any,
) -> dict[str, Any]:
    def tier(tier_id: int, text: str) -> dict[str, Any]:
        return {
            "id": tier_id,
            "content": text,
            "keywords": "",
            "shorthand": "",
            "highlight": "",
            "guidance": "",
        }

    doc = {
        "id": id,
        "uid": 7,
        "title": title,
        "content": content,
        "labels": ["redis"],
        "status": status,
        "answer": {
            "analysis": tier(11, "Many readers miss at once"),
            "basic": tier(12, "Use a lock around the reload"),
            "intermediate": tier(13, "Refresh before expiry"),
            "advanced": tier(14, "Probabilistic early expiration"),
        },
        "utime": UTIME_MS,
    }
    doc.update(extra)
    return doc


def skill_doc(id: int = 1, name: str = "Redis", desc: str = "Key value store", **extra: Any) -> dict[str, Any]:
    def level(level_id: int, text: str) -> dict[str, Any]:
        return {
            "id": level_id,
            "desc": text,
            "questions": [1, 2],
            "cases": [3],
            "ctime": UTIME_MS,
            "utime": UTIME_MS,
        }

    doc = {
        "id": id,
        "name": name,
        "desc": desc,
        "labels": ["storage"],
        "basic": level(21, "Data types"),
        "intermediate": level(22, "Persistence and replication"),
        "advanced": level(23, "Cluster slot migration"),
        "ctime": UTIME_MS,
        "utime": UTIME_MS,
    }
    doc.update(extra)
    return doc


def question_set_doc(
    id: int = 1,
    title: str = "Redis interview set",
    description: str = "Common redis questions",
    **extra: Any,
) -> dict[str, Any]:
    doc = {
        "id": id,
        "uid": 7,
        "title": title,
        "description": description,
        "questions": [1, 2, 3],
        "utime": UTIME_MS,
    }
    doc.update(extra)
    return doc
