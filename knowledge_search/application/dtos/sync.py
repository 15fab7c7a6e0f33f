"""DTOs for index synchronization: the sync event payload and queue messages."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from knowledge_search.domain.exceptions import SyncDecodeError


@dataclass(frozen=True)
class QueueMessage:
    """One message received from a consumer group."""

    id: str
    topic: str
    value: bytes


@dataclass(frozen=True)
class SyncEvent:
    """Change notification produced by a CRUD module for one searchable record.

    Wire format: {"biz": str, "bizID": str | int, "data": "<JSON document>"}.
    """

    biz: str
    biz_id: str
    data: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire field names."""
        return {"biz": self.biz, "bizID": self.biz_id, "data": self.data}

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict()).encode()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SyncEvent:
        """Deserialize from the wire format.

        Raises:
            SyncDecodeError: If a field is missing or has the wrong type.
        """
        try:
            biz = data["biz"]
            biz_id = data["bizID"]
            document = data["data"]
        except (KeyError, TypeError) as e:
            raise SyncDecodeError(f"missing field: {e}") from e
        if not isinstance(biz, str) or not biz:
            raise SyncDecodeError("biz must be a non-empty string")
        # bool is an int subclass; reject it explicitly.
        if isinstance(biz_id, bool) or not isinstance(biz_id, (str, int)):
            raise SyncDecodeError("bizID must be a string or integer")
        if not isinstance(document, str):
            raise SyncDecodeError("data must be a JSON-encoded string")
        return cls(biz=biz, biz_id=str(biz_id), data=document)

    @classmethod
    def from_json(cls, raw: bytes | str) -> SyncEvent:
        """Decode a queue message value.

        Raises:
            SyncDecodeError: If raw is not valid JSON or not a valid event.
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SyncDecodeError(str(e)) from e
        if not isinstance(data, dict):
            raise SyncDecodeError("event must be a JSON object")
        return cls.from_dict(data)

    @classmethod
    def for_document(cls, biz: str, biz_id: str | int, document: dict[str, Any]) -> SyncEvent:
        """Build an event carrying document JSON-encoded in data."""
        return cls(biz=biz, biz_id=str(biz_id), data=json.dumps(document))
