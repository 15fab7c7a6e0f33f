"""Health check endpoints, used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from knowledge_search.core.config import get_settings
from knowledge_search.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


def _not_ready(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(message=message).model_dump(),
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Not ready", "model": ReadinessErrorResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 once indices are bootstrapped and the sync consumer runs.

    The consumer is only checked when SYNC_CONSUMER_ENABLED is true.
    """
    state = request.app.state
    if not getattr(state, "bootstrap_complete", False):
        return _not_ready("Index bootstrap not complete")
    if get_settings().sync_consumer_enabled:
        consumer = getattr(state, "sync_consumer", None)
        if consumer is None or not consumer.running:
            return _not_ready("Sync consumer not running")
    return ReadinessResponse()
