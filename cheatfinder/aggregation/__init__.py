"""Multi-source search aggregation."""

from .engine import CheatSheetEngine, cache_key, deduplicate
from .suggestions import COMMON_TOPICS, SMART_SUGGESTIONS, autocomplete

__all__ = [
    "COMMON_TOPICS",
    "CheatSheetEngine",
    "SMART_SUGGESTIONS",
    "autocomplete",
    "cache_key",
    "deduplicate",
]
