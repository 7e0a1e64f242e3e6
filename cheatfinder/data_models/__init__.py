"""Data models shared by sources, storage and hosts."""

from .item import CheatSheetItem
from .options import DEFAULT_CACHE_DURATION, SourceName, SourceOptions
from .usage import CommandUsage

__all__ = [
    "CheatSheetItem",
    "CommandUsage",
    "DEFAULT_CACHE_DURATION",
    "SourceName",
    "SourceOptions",
]
