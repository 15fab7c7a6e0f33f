"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (document store, message queue).
"""

from knowledge_search.application.interfaces import (
    IDocumentStore,
    IMessageQueue,
    IQueueConsumer,
    ISearchHandler,
)
from knowledge_search.application.services import parse_expression
from knowledge_search.application.use_cases import IndexSyncService, SearchService

__all__ = [
    "IDocumentStore",
    "IMessageQueue",
    "IQueueConsumer",
    "ISearchHandler",
    "IndexSyncService",
    "SearchService",
    "parse_expression",
]
