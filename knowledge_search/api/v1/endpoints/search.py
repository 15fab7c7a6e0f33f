"""Search API: one expression searched across cases, questions, skills and question sets."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from knowledge_search.api.v1.dependencies import get_admin_search, get_public_search
from knowledge_search.application.use_cases.search import SearchService
from knowledge_search.core.limiter import limit_search
from knowledge_search.schemas.search import (
    CompactSearchResponse,
    SearchRequest,
    SearchResponse,
    to_compact_response,
)

router = APIRouter()


@router.post("/search/list", response_model=CompactSearchResponse)
@limit_search
async def search_list(
    request: Request,
    body: SearchRequest,
    search_svc: Annotated[SearchService, Depends(get_public_search)],
) -> CompactSearchResponse:
    """Search published content; one description line per hit."""
    result = await search_svc.search(body.keywords, body.offset, body.limit)
    return to_compact_response(result)


@router.post("/admin/search/list", response_model=SearchResponse)
@limit_search
async def admin_search_list(
    request: Request,
    body: SearchRequest,
    search_svc: Annotated[SearchService, Depends(get_admin_search)],
) -> SearchResponse:
    """Search draft content; full entities with highlight fragments."""
    result = await search_svc.search(body.keywords, body.offset, body.limit)
    return SearchResponse.from_domain(result)
