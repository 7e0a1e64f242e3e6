"""Fuzzy matching and relevance scoring."""

from .fuzzy import DEFAULT_MIN_SCORE, fuzzy_score, is_fuzzy_match
from .scoring import POPULAR_COMMAND_PREFIXES, is_popular_command, relevance_score

__all__ = [
    "DEFAULT_MIN_SCORE",
    "POPULAR_COMMAND_PREFIXES",
    "fuzzy_score",
    "is_fuzzy_match",
    "is_popular_command",
    "relevance_score",
]
