"""Messaging: Redis Streams queue, sync event producer and index sync consumer."""

from knowledge_search.infrastructure.messaging.producer import SyncEventProducer
from knowledge_search.infrastructure.messaging.redis_streams import (
    RedisStreamConsumer,
    RedisStreamQueue,
)
from knowledge_search.infrastructure.messaging.sync_consumer import (
    ConsumerState,
    SyncConsumer,
)

__all__ = [
    "ConsumerState",
    "RedisStreamConsumer",
    "RedisStreamQueue",
    "SyncConsumer",
    "SyncEventProducer",
]
