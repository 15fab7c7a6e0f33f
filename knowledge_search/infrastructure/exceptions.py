"""Infrastructure exceptions for the document store and message queue.

These extend SearchException so the dispatch engine and the HTTP layer
handle them with the same error_code/details shape as domain errors.
"""

from knowledge_search.domain.exceptions import SearchException


class SearchStoreError(SearchException):
    """Document store request failed (transport, timeout, or rejected request)."""

    def __init__(self, operation: str, index: str, reason: str) -> None:
        super().__init__(
            f"Document store {operation} failed on {index}",
            "STORE_ERROR",
            {"operation": operation, "index": index, "reason": reason},
        )


class DocumentDecodeError(SearchException):
    """A search hit could not be mapped to its entity."""

    def __init__(self, index: str, doc_id: str, reason: str) -> None:
        super().__init__(
            f"Failed to decode document {doc_id} from {index}",
            "DOCUMENT_DECODE_ERROR",
            {"index": index, "doc_id": doc_id, "reason": reason},
        )


class ConsumerClosedError(SearchException):
    """The queue consumer was closed; no further messages will be delivered."""

    def __init__(self, topic: str) -> None:
        super().__init__(
            f"Consumer for {topic} is closed",
            "CONSUMER_CLOSED",
            {"topic": topic},
        )
