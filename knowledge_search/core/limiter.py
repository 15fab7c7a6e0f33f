"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. The search limit string comes from
settings so deployments can tune it without code changes.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from knowledge_search.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def search_limit() -> str:
    """Current per-client limit for search endpoints (e.g. '60/minute')."""
    return get_settings().search_rate_limit


limit_search = limiter.limit(search_limit)
