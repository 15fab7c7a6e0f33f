"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from knowledge_search.infrastructure.
"""

from knowledge_search.application.interfaces.repositories import (
    ICaseSearchRepository,
    IDocumentStore,
    IEntitySearchRepository,
    IQuestionSearchRepository,
    IQuestionSetSearchRepository,
    ISkillSearchRepository,
)
from knowledge_search.application.interfaces.services import (
    IMessageQueue,
    IQueueConsumer,
    ISearchHandler,
)

__all__ = [
    "ICaseSearchRepository",
    "IDocumentStore",
    "IEntitySearchRepository",
    "IMessageQueue",
    "IQueueConsumer",
    "IQuestionSearchRepository",
    "IQuestionSetSearchRepository",
    "ISearchHandler",
    "ISkillSearchRepository",
]
