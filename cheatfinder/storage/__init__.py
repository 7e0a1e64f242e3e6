"""Response cache and local persistence (favorites, usage history)."""

from .cache import ResponseCache
from .favorites import FavoritesStore
from .usage_history import UsageTracker

__all__ = ["FavoritesStore", "ResponseCache", "UsageTracker"]
