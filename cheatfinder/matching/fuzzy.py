"""Fuzzy matching between a query and a candidate string.

Scores are integers in [0, 100]:
- Exact match: 100
- Prefix match: 90
- Contains match: 80
- Otherwise the best of edit distance similarity, word boundary match
  and ordered subsequence match (the latter two capped at 75)
"""

from __future__ import annotations

import re

from rapidfuzz.distance import Levenshtein

DEFAULT_MIN_SCORE = 30

_WORD_SEPARATORS = re.compile(r"[ \-_.]+")


def fuzzy_score(query: str, target: str) -> int:
    """Similarity between ``query`` and ``target``, higher is better."""
    if not query or not query.strip() or not target or not target.strip():
        return 0

    search = query.strip().lower()
    text = target.lower()

    if text == search:
        return 100
    if text.startswith(search):
        return 90
    if search in text:
        return 80

    return max(
        _levenshtein_similarity(search, text),
        _word_boundary_score(search, text),
        _sequence_score(search, text),
    )


def is_fuzzy_match(query: str, target: str, min_score: int = DEFAULT_MIN_SCORE) -> bool:
    return fuzzy_score(query, target) >= min_score


def _levenshtein_similarity(search: str, text: str) -> int:
    distance = Levenshtein.distance(search, text)
    max_length = max(len(search), len(text))
    similarity = (1.0 - distance / max_length) * 100
    return int(max(0.0, similarity))


def _word_boundary_score(search: str, text: str) -> int:
    best = 0
    for word in _WORD_SEPARATORS.split(text):
        if not word:
            continue
        if word.startswith(search):
            return 75
        if search in word:
            best = 60
    return best


def _sequence_score(search: str, text: str) -> int:
    """Greedy in-order character match, for typos and abbreviations."""
    if len(search) < 2:
        return 0

    text_index = 0
    matched = 0
    for char in search:
        found = text.find(char, text_index)
        if found < 0:
            break
        matched += 1
        text_index = found + 1

    score = matched * 100 // len(search)
    if matched == len(search):
        score += 20

    return min(score, 75)
