"""Tests for search exceptions (error_code, message, details)."""

from knowledge_search.domain.exceptions import (
    BootstrapError,
    HandlerError,
    ParseError,
    SearchException,
    SyncDecodeError,
    SyncUpsertError,
    UnknownBizError,
    UnknownTargetError,
)
from knowledge_search.infrastructure.exceptions import (
    ConsumerClosedError,
    DocumentDecodeError,
    SearchStoreError,
)


def test_search_exception_default_error_code() -> None:
    """Base SearchException uses class name as error_code when not provided."""
    exc = SearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "SearchException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = ParseError("case:foo")
    assert exc.to_dict() == {
        "error": "PARSE_ERROR",
        "message": "Invalid search expression; expected biz:<target>:<keywords>",
        "details": {"expression": "case:foo"},
    }


def test_unknown_target_message() -> None:
    exc = UnknownTargetError("video")
    assert exc.message == "No handler for business: video"
    assert exc.error_code == "UNKNOWN_TARGET"


def test_handler_error_keeps_biz_and_reason() -> None:
    exc = HandlerError("skill", "timeout")
    assert exc.biz == "skill"
    assert exc.details == {"biz": "skill", "reason": "timeout"}


def test_write_path_error_codes() -> None:
    assert SyncDecodeError("x").error_code == "SYNC_DECODE_ERROR"
    assert UnknownBizError("x").error_code == "UNKNOWN_BIZ"
    assert SyncUpsertError("i", "1", "r").error_code == "SYNC_UPSERT_ERROR"
    assert BootstrapError("i", "r").error_code == "BOOTSTRAP_ERROR"


def test_infrastructure_errors_are_search_exceptions() -> None:
    for exc in (
        SearchStoreError("search", "case_index", "boom"),
        DocumentDecodeError("case_index", "1", "bad id"),
        ConsumerClosedError("topic"),
    ):
        assert isinstance(exc, SearchException)
    assert SearchStoreError("search", "i", "r").details == {
        "operation": "search",
        "index": "i",
        "reason": "r",
    }
