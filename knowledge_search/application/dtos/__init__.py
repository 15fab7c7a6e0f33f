"""Application DTOs (no dependency on infrastructure clients)."""

from knowledge_search.application.dtos.sync import QueueMessage, SyncEvent

__all__ = ["QueueMessage", "SyncEvent"]
