"""Presentation-layer dependency injection.

Search services are built once in the lifespan (composition root) and
stored on app.state; routes depend only on these accessors.
"""

from fastapi import HTTPException, Request

from knowledge_search.application.use_cases.search import SearchService


def _service(request: Request, name: str) -> SearchService:
    service = getattr(request.app.state, name, None)
    if service is None:
        raise HTTPException(status_code=503, detail="Search service not initialized")
    return service


def get_public_search(request: Request) -> SearchService:
    """Search service over the published indices."""
    return _service(request, "public_search")


def get_admin_search(request: Request) -> SearchService:
    """Search service over the draft indices."""
    return _service(request, "admin_search")
