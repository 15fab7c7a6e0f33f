"""Sync event producer used by the modules that own searchable records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from knowledge_search.application.dtos.sync import SyncEvent
from knowledge_search.core.constants import SYNC_TOPIC

if TYPE_CHECKING:
    from knowledge_search.application.interfaces.services import IMessageQueue

logger = logging.getLogger(__name__)


class SyncEventProducer:
    """Publishes record changes to the sync topic."""

    def __init__(self, queue: IMessageQueue, topic: str = SYNC_TOPIC) -> None:
        self.queue = queue
        self.topic = topic

    async def produce(self, biz: str, biz_id: str | int, document: dict[str, Any]) -> str:
        """Publish document as the latest version of biz/biz_id.

        Returns:
            Queue message id.
        """
        event = SyncEvent.for_document(biz, biz_id, document)
        message_id = await self.queue.produce(self.topic, event.to_json())
        logger.debug("Produced sync event %s %s as %s", biz, biz_id, message_id)
        return message_id
