from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Literal

SourceName = Literal["cheatsh", "devhints", "tldr"]

DEFAULT_CACHE_DURATION = timedelta(hours=2)


@dataclass(frozen=True)
class SourceOptions:
    """Snapshot of which sources to query and how long to cache results."""

    enable_cheatsh: bool = True
    enable_devhints: bool = True
    enable_tldr: bool = True
    cache_duration: timedelta | None = None

    def is_enabled(self, source: SourceName) -> bool:
        return {
            "cheatsh": self.enable_cheatsh,
            "devhints": self.enable_devhints,
            "tldr": self.enable_tldr,
        }[source]

    @property
    def effective_cache_duration(self) -> timedelta:
        if self.cache_duration is None or self.cache_duration <= timedelta(0):
            return DEFAULT_CACHE_DURATION
        return self.cache_duration

    @property
    def flags_key(self) -> str:
        return f"{self.enable_cheatsh}_{self.enable_devhints}_{self.enable_tldr}"
