"""Index sync consumer: long-running loop applying sync events to the indices.

Delivery is at-most-once per message from the consumer's point of view:
every received message is acknowledged, whether it was applied or not.
Bad messages are logged and dropped; they never stop the loop.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING

from knowledge_search.application.dtos.sync import SyncEvent
from knowledge_search.core.constants import SYNC_GROUP, SYNC_TOPIC
from knowledge_search.domain.exceptions import SearchException, SyncDecodeError
from knowledge_search.infrastructure.exceptions import ConsumerClosedError

if TYPE_CHECKING:
    from knowledge_search.application.dtos.sync import QueueMessage
    from knowledge_search.application.interfaces.services import (
        IMessageQueue,
        IQueueConsumer,
    )
    from knowledge_search.application.use_cases.sync import IndexSyncService

logger = logging.getLogger(__name__)


class ConsumerState(str, Enum):
    """Lifecycle of the sync consumer loop."""

    IDLE = "idle"
    LISTENING = "listening"
    PROCESSING = "processing"
    STOPPED = "stopped"


class SyncConsumer:
    """Subscribes to the sync topic and upserts each event's document.

    start() spawns one background task; stop() closes the subscription,
    which unblocks a pending receive, then waits for the task (cancelling
    it if it does not finish within stop_timeout_seconds).
    """

    def __init__(
        self,
        queue: IMessageQueue,
        sync_service: IndexSyncService,
        topic: str = SYNC_TOPIC,
        group: str = SYNC_GROUP,
        retry_backoff_seconds: float = 1.0,
        stop_timeout_seconds: float = 5.0,
    ) -> None:
        self.queue = queue
        self.sync_service = sync_service
        self.topic = topic
        self.group = group
        self.retry_backoff_seconds = retry_backoff_seconds
        self.stop_timeout_seconds = stop_timeout_seconds
        self.state = ConsumerState.IDLE
        self._consumer: IQueueConsumer | None = None
        self._task: asyncio.Task[None] | None = None
        self._stopping = asyncio.Event()

    @property
    def running(self) -> bool:
        """True while the loop task is alive and subscribed."""
        return (
            self._task is not None
            and not self._task.done()
            and self._consumer is not None
        )

    async def subscribe(self) -> None:
        """Join the consumer group if not already subscribed."""
        if self._consumer is None:
            self._consumer = await self.queue.consumer(self.topic, self.group)
            logger.info("Sync consumer subscribed: topic=%s group=%s", self.topic, self.group)

    async def start(self) -> None:
        """Start the consume loop in the background (no-op if already running)."""
        if self._task is not None and not self._task.done():
            return
        self._stopping.clear()
        self._task = asyncio.create_task(self._run(), name="sync-consumer")

    async def stop(self) -> None:
        """Close the subscription and wait for the loop to exit."""
        self._stopping.set()
        if self._consumer is not None:
            await self._consumer.close()
        task = self._task
        if task is None:
            return
        done, _ = await asyncio.wait({task}, timeout=self.stop_timeout_seconds)
        if not done:
            logger.warning("Sync consumer did not stop in time; cancelling")
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        self._consumer = None
        self.state = ConsumerState.STOPPED
        logger.info("Sync consumer stopped")

    async def _run(self) -> None:
        try:
            while not self._stopping.is_set():
                try:
                    await self.consume_one()
                except ConsumerClosedError:
                    break
                except Exception:
                    logger.exception("Sync consumer receive failed; retrying")
                    await self._backoff()
        finally:
            self.state = ConsumerState.STOPPED

    async def _backoff(self) -> None:
        try:
            await asyncio.wait_for(self._stopping.wait(), self.retry_backoff_seconds)
        except TimeoutError:
            pass

    async def consume_one(self) -> None:
        """Receive one message, apply it, and acknowledge it.

        Raises:
            ConsumerClosedError: If the subscription was closed.
        """
        await self.subscribe()
        if self._stopping.is_set():
            raise ConsumerClosedError(self.topic)
        self.state = ConsumerState.LISTENING
        message = await self._consumer.consume()
        self.state = ConsumerState.PROCESSING
        try:
            await self._apply(message)
        finally:
            await self._consumer.ack(message)
            self.state = ConsumerState.LISTENING

    async def _apply(self, message: QueueMessage) -> None:
        try:
            event = SyncEvent.from_json(message.value)
        except SyncDecodeError as e:
            logger.error(
                "Dropping undecodable sync message %s: %s",
                message.id,
                e.details.get("reason"),
            )
            return
        try:
            index = await self.sync_service.apply(event)
        except SearchException as e:
            logger.error(
                "Dropping sync event biz=%s bizID=%s: %s %s",
                event.biz,
                event.biz_id,
                e.error_code,
                e.details,
            )
            return
        logger.debug("Synced %s %s into %s", event.biz, event.biz_id, index)
