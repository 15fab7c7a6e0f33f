"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (last added = outermost).
Import and use from knowledge_search.main.
"""

from knowledge_search.middleware.request_id import RequestIDMiddleware
from knowledge_search.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
