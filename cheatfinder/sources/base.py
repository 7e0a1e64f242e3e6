"""Shared HTTP plumbing for the online sources."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

import httpx

from cheatfinder.data_models import CheatSheetItem, SourceName

from .port import FetchResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 6.0
DEFAULT_USER_AGENT = "CheatSheetsFinder/1.0"


class SourceContentError(Exception):
    """The source answered, but with content we cannot use."""


def create_http_client(
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Client shared by all sources of one engine."""
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        headers={
            "User-Agent": user_agent,
            "Accept-Encoding": "gzip, deflate",
        },
    )


class HttpSource(ABC):
    """Base for sources that GET plain text and parse it into items.

    Subclasses implement ``_search``; ``fetch`` turns every exception into
    a failed ``FetchResult`` so one broken source never affects the others.
    """

    name: ClassVar[SourceName]

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = create_http_client(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get_text(self, url: str) -> str | None:
        """GET ``url``; None for error statuses (missing page, rate limit)."""
        client = self._get_client()
        response = await client.get(url, timeout=self.timeout)
        if response.is_error:
            logger.debug("%s: %s returned %d", self.name, url, response.status_code)
            return None
        return response.text

    async def fetch(self, term: str) -> FetchResult:
        term = term.strip()
        if not term:
            return FetchResult.success(self.name, [])

        try:
            items = await self._search(term)
        except SourceContentError as e:
            logger.debug("%s: unusable content for %r: %s", self.name, term, e)
            return FetchResult.failure(self.name, str(e))
        except httpx.TimeoutException as e:
            logger.warning("%s: timeout for %r: %s", self.name, term, e)
            return FetchResult.failure(self.name, f"timeout: {e}")
        except httpx.HTTPError as e:
            logger.warning("%s: request failed for %r: %s", self.name, term, e)
            return FetchResult.failure(self.name, f"{type(e).__name__}: {e}")
        except Exception as e:
            logger.warning(
                "%s: unexpected error for %r (%s): %s",
                self.name,
                term,
                type(e).__name__,
                e,
            )
            return FetchResult.failure(self.name, f"{type(e).__name__}: {e}")

        logger.debug("%s: %d items for %r", self.name, len(items), term)
        return FetchResult.success(self.name, items)

    @abstractmethod
    async def _search(self, term: str) -> list[CheatSheetItem]:
        """Query the source; may raise, ``fetch`` handles it."""
