"""Service interfaces (ports) for the application layer.

Protocols define contracts for search handlers and the message queue (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from knowledge_search.application.dtos.sync import QueueMessage
    from knowledge_search.domain.entities import SearchResult


# Search handler interface
class ISearchHandler(Protocol):
    """Protocol for one entity category's search capability.

    Registered in the dispatch engine under biz. Returns its own partial
    result; never writes to a shared aggregate.
    """

    biz: str

    async def search(self, keywords: str, offset: int, limit: int) -> SearchResult:
        """Search this category; return a SearchResult holding only its collection."""


# Message queue interfaces
class IQueueConsumer(Protocol):
    """Protocol for a consumer-group subscription to one topic."""

    async def consume(self) -> QueueMessage:
        """Block until the next message arrives.

        Raises ConsumerClosedError once close() has been called.
        """

    async def ack(self, message: QueueMessage) -> None:
        """Acknowledge message so the group does not redeliver it."""

    async def close(self) -> None:
        """Close the subscription; unblocks a pending consume()."""


class IMessageQueue(Protocol):
    """Protocol for the message-queue system (produce and consumer groups)."""

    async def produce(self, topic: str, message: bytes) -> str:
        """Append message to topic; return the message id."""

    async def consumer(self, topic: str, group: str) -> IQueueConsumer:
        """Join group on topic and return a consumer handle."""

    async def close(self) -> None:
        """Release connection resources."""
