"""Pytest configuration and fixtures for knowledge-search.

Environment is fixed before the app is imported: no index bootstrap, no
sync consumer and a rate limit high enough never to trip. The ASGI test
transport does not run the lifespan, so the client fixture wires search
services over an in-memory store onto app.state itself.
"""

import os

os.environ.setdefault("ELASTICSEARCH_BOOTSTRAP_ENABLED", "false")
os.environ.setdefault("SYNC_CONSUMER_ENABLED", "false")
os.environ.setdefault("SEARCH_RATE_LIMIT", "10000/minute")
os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient

from knowledge_search.core.config import get_settings

get_settings.cache_clear()

from knowledge_search.domain.enums import SearchView
from knowledge_search.infrastructure.search.factory import build_search_service
from knowledge_search.main import app
from tests.fakes import FakeDocumentStore, FakeMessageQueue


@pytest.fixture
def fake_store() -> FakeDocumentStore:
    """Empty in-memory document store."""
    return FakeDocumentStore()


@pytest.fixture
def fake_queue() -> FakeMessageQueue:
    """Empty in-memory message queue."""
    return FakeMessageQueue()


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Set env vars for one test; settings cache is cleared before and after.

    Usage: settings_env(SYNC_CONSUMER_ENABLED="true").
    """

    def _apply(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()

    yield _apply
    monkeypatch.undo()
    get_settings.cache_clear()


@pytest.fixture
async def client(fake_store: FakeDocumentStore) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), backed by fake_store."""
    app.state.store = fake_store
    app.state.public_search = build_search_service(fake_store, SearchView.PUBLIC)
    app.state.admin_search = build_search_service(fake_store, SearchView.ADMIN)
    app.state.bootstrap_complete = True
    app.state.sync_consumer = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
