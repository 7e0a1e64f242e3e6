"""Search and autocomplete endpoints."""

import logging
import time

from fastapi import APIRouter, Query

from cheatfinder.api.dependencies import EngineDep, QueryServiceDep
from cheatfinder.api.schemas import SearchResponse, SuggestResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/search", response_model=SearchResponse)
async def search(
    service: QueryServiceDep,
    q: str = Query(..., min_length=1, description="Search terms or a cs: command"),
) -> SearchResponse:
    start = time.perf_counter()
    results = await service.handle(q)
    logger.info(
        "Search %r: %d results in %.0fms",
        q,
        len(results),
        (time.perf_counter() - start) * 1000,
    )
    return SearchResponse(query=q, count=len(results), results=results)


@router.get("/suggest", response_model=SuggestResponse)
async def suggest(
    engine: EngineDep,
    q: str = Query(..., min_length=1),
) -> SuggestResponse:
    return SuggestResponse(query=q, suggestions=engine.suggest(q))
