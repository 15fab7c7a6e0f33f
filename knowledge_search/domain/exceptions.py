"""Domain exceptions for the search subsystem.

Read-path errors (parse, unknown target, handler) are surfaced to the HTTP
layer, which maps error_code to a status in exception handlers. Write-path
errors (sync decode, unknown biz, upsert) are raised inside the sync consumer
and only ever logged there.
"""

from typing import Any


class SearchException(Exception):
    """Base exception for all search subsystem errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. expression, index).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ParseError(SearchException):
    """Raised when a search expression does not match biz:<target>:<keywords>."""

    def __init__(self, expression: str) -> None:
        super().__init__(
            "Invalid search expression; expected biz:<target>:<keywords>",
            "PARSE_ERROR",
            {"expression": expression},
        )


class UnknownTargetError(SearchException):
    """Raised when a well-formed expression names a target with no handler."""

    def __init__(self, target: str) -> None:
        super().__init__(
            f"No handler for business: {target}",
            "UNKNOWN_TARGET",
            {"target": target},
        )


class HandlerError(SearchException):
    """Raised when any per-entity handler fails during a search.

    The whole search fails; no partial results are returned.
    """

    def __init__(self, biz: str, reason: str) -> None:
        """Initialize with the failing handler and the reason.

        Args:
            biz: Business tag of the handler that failed (e.g. 'case').
            reason: Human-readable cause (usually str() of the original error).
        """
        super().__init__(
            f"Search failed for {biz}",
            "HANDLER_ERROR",
            {"biz": biz, "reason": reason},
        )
        self.biz = biz


class SyncDecodeError(SearchException):
    """Raised when a sync event payload (or its document) cannot be decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Failed to decode sync event",
            "SYNC_DECODE_ERROR",
            {"reason": reason},
        )


class UnknownBizError(SearchException):
    """Raised when a sync event's biz tag maps to no known index."""

    def __init__(self, biz: str) -> None:
        super().__init__(
            f"No index for business: {biz}",
            "UNKNOWN_BIZ",
            {"biz": biz},
        )


class SyncUpsertError(SearchException):
    """Raised when indexing a synced document into the store fails."""

    def __init__(self, index: str, doc_id: str, reason: str) -> None:
        super().__init__(
            f"Failed to index document {doc_id} into {index}",
            "SYNC_UPSERT_ERROR",
            {"index": index, "doc_id": doc_id, "reason": reason},
        )


class BootstrapError(SearchException):
    """Raised when an index cannot be checked or created at startup."""

    def __init__(self, index: str, reason: str) -> None:
        super().__init__(
            f"Failed to bootstrap index: {index}",
            "BOOTSTRAP_ERROR",
            {"index": index, "reason": reason},
        )
