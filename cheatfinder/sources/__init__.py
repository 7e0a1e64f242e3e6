"""Online cheat sheet sources."""

from .base import HttpSource, SourceContentError, create_http_client
from .cheatsh import CheatShAdapter
from .devhints import DevHintsAdapter
from .port import FetchResult, SourcePort
from .tldr import TldrAdapter

__all__ = [
    "CheatShAdapter",
    "DevHintsAdapter",
    "FetchResult",
    "HttpSource",
    "SourceContentError",
    "SourcePort",
    "TldrAdapter",
    "create_http_client",
]
