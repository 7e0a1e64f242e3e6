"""FastAPI application with lifespan management."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cheatfinder import __version__
from cheatfinder.aggregation import CheatSheetEngine
from cheatfinder.config import Settings, configure_logging, get_settings
from cheatfinder.query import QueryService
from cheatfinder.storage import FavoritesStore, UsageTracker

logger = logging.getLogger(__name__)


def _log_settings(settings: Settings) -> None:
    logger.info("=" * 60)
    logger.info("Cheat sheet finder configuration")
    logger.info("=" * 60)
    logger.info("  Log level: %s", settings.log_level)
    logger.info("  Data dir: %s", settings.data_dir)
    logger.info("  Sources:")
    logger.info("    cheat.sh: %s", settings.enable_cheatsh)
    logger.info("    DevHints: %s", settings.enable_devhints)
    logger.info("    tldr: %s", settings.enable_tldr)
    logger.info("  Timeouts:")
    logger.info("    Request: %.1fs", settings.request_timeout)
    logger.info("    Search deadline: %.1fs", settings.search_deadline)
    logger.info("  Cache:")
    logger.info("    Duration: %.1fh", settings.cache_duration_hours)
    logger.info("    Sweep interval: %.0fs", settings.cache_sweep_interval)
    logger.info("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Start the engine (and its cache sweep) at startup, close it at shutdown."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    _log_settings(settings)

    engine = CheatSheetEngine.from_settings(settings)
    engine.start()
    app.state.engine = engine

    favorites = FavoritesStore(settings.favorites_path, limit=settings.favorites_limit)
    usage = UsageTracker(
        settings.history_path,
        limit=settings.history_limit,
        max_age_days=settings.history_max_age_days,
    )
    app.state.query_service = QueryService(engine, favorites, usage)
    logger.info(
        "Ready: %d favorites, %d commands in usage history",
        len(favorites),
        len(usage),
    )
    yield

    logger.info("Shutting down")
    del app.state.query_service
    await engine.close()
    del app.state.engine


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application."""
    from cheatfinder.api.routes import categories, health, search

    app = FastAPI(
        title="Cheat Sheet Finder",
        description="Command snippets from cheat.sh, DevHints, tldr and offline sheets",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    app.include_router(health.router, tags=["health"])
    app.include_router(search.router, tags=["search"])
    app.include_router(categories.router, tags=["categories"])

    return app
