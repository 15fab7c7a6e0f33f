"""Redis Streams message queue: topics are streams, subscriptions are consumer groups.

Each group receives every message of its topic once; members of a group
share the load. Messages stay pending until acknowledged with XACK.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import redis.asyncio as redis

from knowledge_search.application.dtos.sync import QueueMessage
from knowledge_search.infrastructure.exceptions import ConsumerClosedError

if TYPE_CHECKING:
    from knowledge_search.core.config import Settings

logger = logging.getLogger(__name__)

VALUE_FIELD = "value"


class RedisStreamConsumer:
    """Consumer-group member reading one stream.

    consume() blocks in XREADGROUP for at most block_ms per round trip and
    loops until a message arrives. close() unblocks a pending consume()
    immediately with ConsumerClosedError.
    """

    def __init__(
        self,
        client: redis.Redis,
        topic: str,
        group: str,
        name: str,
        block_ms: int = 1000,
    ) -> None:
        self.redis = client
        self.topic = topic
        self.group = group
        self.name = name
        self.block_ms = block_ms
        self._closed = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    async def _read(self) -> QueueMessage | None:
        response = await self.redis.xreadgroup(
            self.group,
            self.name,
            {self.topic: ">"},
            count=1,
            block=self.block_ms,
        )
        for _stream, entries in response or []:
            for message_id, fields in entries:
                value = fields.get(VALUE_FIELD, "")
                if isinstance(value, str):
                    value = value.encode()
                return QueueMessage(id=message_id, topic=self.topic, value=value)
        return None

    async def consume(self) -> QueueMessage:
        """Block until the next message is delivered to this group member.

        Raises:
            ConsumerClosedError: If close() was called before or during the wait.
        """
        while True:
            if self.closed:
                raise ConsumerClosedError(self.topic)
            read = asyncio.ensure_future(self._read())
            closing = asyncio.ensure_future(self._closed.wait())
            try:
                await asyncio.wait(
                    {read, closing}, return_when=asyncio.FIRST_COMPLETED
                )
            finally:
                for fut in (read, closing):
                    if not fut.done():
                        fut.cancel()
                await asyncio.gather(read, closing, return_exceptions=True)
            if read.cancelled():
                raise ConsumerClosedError(self.topic)
            message = read.result()
            if message is not None:
                return message

    async def ack(self, message: QueueMessage) -> None:
        await self.redis.xack(self.topic, self.group, message.id)

    async def close(self) -> None:
        self._closed.set()


class RedisStreamQueue:
    """IMessageQueue over Redis Streams.

    Call close() at shutdown to release the connection pool.
    """

    def __init__(
        self,
        client: redis.Redis,
        consumer_name: str = "knowledge-search",
        block_ms: int = 1000,
    ) -> None:
        """Initialize with an existing client. Pass a mock for testing."""
        self.redis = client
        self.consumer_name = consumer_name
        self.block_ms = block_ms

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisStreamQueue:
        client = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            password=settings.redis_password.get_secret_value() if settings.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )
        logger.info(
            "Redis stream queue configured: %s:%s",
            settings.redis_host,
            settings.redis_port,
        )
        return cls(
            client,
            consumer_name=settings.sync_consumer_name,
            block_ms=settings.sync_block_ms,
        )

    async def produce(self, topic: str, message: bytes) -> str:
        """Append message to the topic stream; return the entry id."""
        message_id = await self.redis.xadd(topic, {VALUE_FIELD: message})
        if isinstance(message_id, bytes):
            message_id = message_id.decode()
        return message_id

    async def consumer(self, topic: str, group: str) -> RedisStreamConsumer:
        """Join group on topic, creating the stream and group if needed."""
        try:
            await self.redis.xgroup_create(topic, group, id="0", mkstream=True)
            logger.info("Created consumer group %s on %s", group, topic)
        except redis.ResponseError as e:
            if "BUSYGROUP" not in str(e):
                raise
        return RedisStreamConsumer(
            self.redis, topic, group, self.consumer_name, block_ms=self.block_ms
        )

    async def close(self) -> None:
        await self.redis.aclose()
        logger.info("Redis stream queue closed")
