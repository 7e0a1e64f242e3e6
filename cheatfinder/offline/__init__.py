"""Offline cheat sheets available without network access."""

from .catalog import categories, get_by_category, offline_score, search
from .sheets import OFFLINE_SHEETS, OfflineEntry

__all__ = [
    "OFFLINE_SHEETS",
    "OfflineEntry",
    "categories",
    "get_by_category",
    "offline_score",
    "search",
]
