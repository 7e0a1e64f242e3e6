"""In-memory TTL cache for aggregated search responses."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL = 300.0

_MISSING = object()


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class ResponseCache:
    """Thread-safe key/value store with per-entry expiry.

    Expired entries are evicted lazily on ``get`` and in bulk by ``sweep``,
    which a background thread runs every ``sweep_interval`` seconds between
    ``start()`` and ``close()``.
    """

    def __init__(
        self,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        if sweep_interval <= 0:
            raise ValueError("sweep_interval must be positive")

        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self.sweep_interval = sweep_interval

        self._stop_event = threading.Event()
        self._sweeper: threading.Thread | None = None

    def get(self, key: str, default: Any = None) -> Any:
        """Value for ``key``, or ``default`` if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return default
            return entry.value

    def set(self, key: str, value: Any, ttl: timedelta) -> None:
        seconds = ttl.total_seconds()
        if seconds < 0:
            raise ValueError("ttl must not be negative")

        with self._lock:
            self._entries[key] = CacheEntry(value, self._clock() + seconds)

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def sweep(self) -> int:
        """Drop every expired entry. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Swept %d expired cache entries", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    # Lifecycle

    @property
    def is_running(self) -> bool:
        return self._sweeper is not None and self._sweeper.is_alive()

    def start(self) -> None:
        """Start the background sweep thread (idempotent)."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._sweeper = threading.Thread(
            target=self._sweep_loop,
            name="cheatfinder-cache-sweep",
            daemon=True,
        )
        self._sweeper.start()
        logger.debug("Cache sweep started (every %.0fs)", self.sweep_interval)

    def close(self) -> None:
        """Stop the sweep thread and drop all entries."""
        self._stop_event.set()
        if self._sweeper is not None:
            self._sweeper.join(timeout=5.0)
            self._sweeper = None
        self.clear()

    def _sweep_loop(self) -> None:
        while not self._stop_event.wait(self.sweep_interval):
            try:
                self.sweep()
            except Exception:
                logger.exception("Cache sweep failed")
