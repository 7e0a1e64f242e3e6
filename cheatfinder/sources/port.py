from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from cheatfinder.data_models import CheatSheetItem, SourceName


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one source fetch: items on success, a reason on failure."""

    source: SourceName
    items: list[CheatSheetItem] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, source: SourceName, items: list[CheatSheetItem]) -> FetchResult:
        return cls(source=source, items=items)

    @classmethod
    def failure(cls, source: SourceName, reason: str) -> FetchResult:
        return cls(source=source, error=reason)


class SourcePort(Protocol):
    """Port for online cheat sheet sources."""

    name: SourceName

    async def fetch(self, term: str) -> FetchResult:
        """Fetch and normalize snippets for ``term``. Never raises."""
        ...
