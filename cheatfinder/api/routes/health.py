"""Health check endpoint."""

from fastapi import APIRouter

from cheatfinder import __version__
from cheatfinder.api.dependencies import EngineDep
from cheatfinder.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(engine: EngineDep) -> HealthResponse:
    """Report enabled sources and cache size."""
    options = engine.default_options
    return HealthResponse(
        status="ok" if engine.cache.is_running else "degraded",
        version=__version__,
        sources={s.name: options.is_enabled(s.name) for s in engine.sources},
        cache_entries=len(engine.cache),
    )
