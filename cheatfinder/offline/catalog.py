"""Search over the bundled offline cheat sheets."""

from __future__ import annotations

from cheatfinder.data_models import CheatSheetItem
from cheatfinder.matching import fuzzy_score, is_fuzzy_match

from .sheets import OFFLINE_SHEETS, OfflineEntry

BASE_SCORE = 60
CATEGORY_SCORE = 70
CATEGORY_PREFIX_BONUS = 20
FUZZY_MIN_SCORE = 40
MAX_RESULTS = 10


def categories() -> list[str]:
    return list(OFFLINE_SHEETS)


def offline_score(term: str, command: str, description: str) -> int:
    """Base 60, plus command/description match bonuses and a fifth of the fuzzy score."""
    score = BASE_SCORE
    command_lower = command.lower()

    if command_lower == term:
        score += 40
    elif command_lower.startswith(term):
        score += 30
    elif term in command_lower:
        score += 20

    if term in description.lower():
        score += 10

    return score + fuzzy_score(term, command) // 5


def _to_item(category: str, entry: OfflineEntry, score: int) -> CheatSheetItem:
    return CheatSheetItem(
        title=entry.command,
        description=entry.description,
        command=entry.command,
        url=f"offline://{category}",
        source_name=f"Offline ({category})",
        score=score,
    )


def _split_category_prefix(term: str) -> tuple[str | None, str]:
    """Split "git commit" into ("git", "commit"); (None, term) without a prefix."""
    for category in OFFLINE_SHEETS:
        if term.startswith(category + " "):
            return category, term[len(category) :].strip()
    return None, term


def search(term: str) -> list[CheatSheetItem]:
    """Top offline matches for ``term``.

    A leading category name ("docker logs") restricts the search to that
    category and boosts its results.
    """
    term = term.strip().lower()
    if not term:
        return []

    prefix, command_term = _split_category_prefix(term)
    bonus = CATEGORY_PREFIX_BONUS if prefix else 0

    results: list[CheatSheetItem] = []
    for category, entries in OFFLINE_SHEETS.items():
        if prefix is not None and category != prefix:
            continue

        for entry in entries:
            matches = (
                command_term in entry.command.lower()
                or command_term in entry.description.lower()
                or (prefix is None and term in category)
                or is_fuzzy_match(command_term, entry.command, FUZZY_MIN_SCORE)
            )
            if not matches:
                continue

            score = offline_score(command_term, entry.command, entry.description)
            results.append(_to_item(category, entry, score + bonus))

    results.sort(key=lambda item: item.score, reverse=True)
    return results[:MAX_RESULTS]


def get_by_category(category: str) -> list[CheatSheetItem]:
    """Every entry of ``category`` in table order, or [] if unknown."""
    key = category.strip().lower()
    entries = OFFLINE_SHEETS.get(key)
    if entries is None:
        return []
    return [_to_item(key, entry, CATEGORY_SCORE) for entry in entries]
