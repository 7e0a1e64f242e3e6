"""Concurrent multi-source search with deadline, dedup and caching."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import httpx

from cheatfinder.data_models import CheatSheetItem, SourceOptions
from cheatfinder.sources import (
    CheatShAdapter,
    DevHintsAdapter,
    FetchResult,
    SourcePort,
    TldrAdapter,
    create_http_client,
)
from cheatfinder.storage import ResponseCache

from .suggestions import autocomplete

if TYPE_CHECKING:
    from cheatfinder.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_DEADLINE = 8.0
CACHE_KEY_VERSION = "cheats:v4"


def cache_key(term: str, options: SourceOptions) -> str:
    """Versioned key; includes the source flags so toggling a source misses."""
    return f"{CACHE_KEY_VERSION}::{term}::{options.flags_key}"


def deduplicate(items: Iterable[CheatSheetItem]) -> list[CheatSheetItem]:
    """Best item per (source, command), sorted by descending score.

    Ties keep the first item seen; the sort is stable.
    """
    best: dict[tuple[str, str], CheatSheetItem] = {}
    for item in items:
        current = best.get(item.dedup_key)
        if current is None or item.score > current.score:
            best[item.dedup_key] = item
    return sorted(best.values(), key=lambda item: item.score, reverse=True)


class CheatSheetEngine:
    """Fans a query out to the enabled sources and merges what comes back.

    Sources still running when the deadline passes are cancelled and
    contribute nothing. Non-empty results are cached per term and source
    combination.
    """

    def __init__(
        self,
        sources: Sequence[SourcePort],
        cache: ResponseCache | None = None,
        deadline: float = DEFAULT_DEADLINE,
        default_options: SourceOptions | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.sources = list(sources)
        self.cache = cache if cache is not None else ResponseCache()
        self.deadline = deadline
        self.default_options = default_options or SourceOptions()
        self._client = client
        self._abandoned: set[asyncio.Task[FetchResult]] = set()

    @classmethod
    def from_settings(cls, settings: Settings) -> CheatSheetEngine:
        """Engine with the three online sources sharing one HTTP client."""
        client = create_http_client(settings.user_agent, settings.request_timeout)
        timeout = settings.request_timeout
        sources: list[SourcePort] = [
            CheatShAdapter(client=client, timeout=timeout),
            DevHintsAdapter(client=client, timeout=timeout),
            TldrAdapter(client=client, timeout=timeout),
        ]
        return cls(
            sources=sources,
            cache=ResponseCache(sweep_interval=settings.cache_sweep_interval),
            deadline=settings.search_deadline,
            default_options=settings.source_options(),
            client=client,
        )

    # Lifecycle

    def start(self) -> None:
        self.cache.start()

    async def close(self) -> None:
        for task in self._abandoned:
            task.cancel()
        self.cache.close()
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> CheatSheetEngine:
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # Queries

    async def search(
        self,
        term: str,
        options: SourceOptions | None = None,
    ) -> list[CheatSheetItem]:
        normalized = term.strip().lower()
        if not normalized:
            return []

        options = options or self.default_options
        key = cache_key(normalized, options)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r", normalized)
            return list(cached)
        logger.debug("Cache miss for %r", normalized)

        enabled = [s for s in self.sources if options.is_enabled(s.name)]
        if not enabled:
            return []

        results = await self._fetch_all(enabled, normalized)
        merged = deduplicate(item for r in results for item in r.items)

        if merged:
            self.cache.set(key, list(merged), options.effective_cache_duration)
        return merged

    def suggest(self, term: str) -> list[str]:
        return autocomplete(term)

    async def _fetch_all(
        self,
        sources: Sequence[SourcePort],
        term: str,
    ) -> list[FetchResult]:
        tasks = [
            asyncio.create_task(source.fetch(term), name=f"fetch-{source.name}")
            for source in sources
        ]
        done, pending = await asyncio.wait(tasks, timeout=self.deadline)

        if pending:
            logger.debug(
                "Deadline of %.1fs passed, abandoning %s",
                self.deadline,
                ", ".join(t.get_name() for t in pending),
            )
            for task in pending:
                task.cancel()
                self._abandoned.add(task)
                task.add_done_callback(self._forget_abandoned)

        results: list[FetchResult] = []
        for source, task in zip(sources, tasks):
            if task not in done:
                continue
            if task.exception() is not None:
                logger.warning("%s raised during fetch: %r", source.name, task.exception())
                continue

            result = task.result()
            if not result.ok:
                logger.warning("%s failed: %s", source.name, result.error)
                continue
            results.append(result)

        return results

    def _forget_abandoned(self, task: asyncio.Task[FetchResult]) -> None:
        # Not awaited anywhere; retrieve the exception so it is not reported as lost
        self._abandoned.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.debug("%s failed after the deadline: %r", task.get_name(), task.exception())
