"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (document store,
index bootstrap, search registries, sync consumer, telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from knowledge_search.application.use_cases.sync import IndexSyncService
from knowledge_search.core.config import get_settings
from knowledge_search.domain.enums import SearchView
from knowledge_search.domain.exceptions import BootstrapError
from knowledge_search.infrastructure.messaging import RedisStreamQueue, SyncConsumer
from knowledge_search.infrastructure.search import (
    ElasticsearchStore,
    IndexBootstrapper,
    build_search_service,
)
from knowledge_search.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), document store, index
    bootstrap (fatal on failure), public and admin search registries, sync
    consumer (if enabled). Shutdown order: sync consumer stop, queue close,
    store close, telemetry shutdown.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        from knowledge_search.shared.telemetry.telemetry import (
            TelemetryConfig,
            set_telemetry,
        )

        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument(app)

    store = ElasticsearchStore.from_settings(settings)
    app.state.store = store
    app.state.bootstrap_complete = False

    if settings.elasticsearch_bootstrap_enabled:
        bootstrapper = IndexBootstrapper(store)
        try:
            await bootstrapper.ensure_all()
        except BootstrapError:
            logger.exception("Index bootstrap failed; aborting startup")
            await store.close()
            raise
        app.state.bootstrapper = bootstrapper
    app.state.bootstrap_complete = True

    app.state.public_search = build_search_service(
        store,
        SearchView.PUBLIC,
        max_page_size=settings.search_max_page_size,
        default_page_size=settings.search_default_page_size,
    )
    app.state.admin_search = build_search_service(
        store,
        SearchView.ADMIN,
        max_page_size=settings.search_max_page_size,
        default_page_size=settings.search_default_page_size,
    )

    if settings.sync_consumer_enabled:
        queue = RedisStreamQueue.from_settings(settings)
        consumer = SyncConsumer(
            queue,
            IndexSyncService(store),
            topic=settings.sync_topic,
            group=settings.sync_group,
            stop_timeout_seconds=settings.sync_stop_timeout_seconds,
        )
        await consumer.start()
        app.state.queue = queue
        app.state.sync_consumer = consumer
        logger.info("Sync consumer started")
    else:
        app.state.queue = None
        app.state.sync_consumer = None

    yield

    # ---- Shutdown ----
    if getattr(app.state, "sync_consumer", None) is not None:
        await app.state.sync_consumer.stop()
        app.state.sync_consumer = None

    if getattr(app.state, "queue", None) is not None:
        await app.state.queue.close()
        app.state.queue = None

    await store.close()

    from knowledge_search.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
