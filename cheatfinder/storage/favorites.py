"""Persistence for favorite cheat sheet items."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from cheatfinder.data_models import CheatSheetItem
from cheatfinder.matching import fuzzy_score, is_fuzzy_match

logger = logging.getLogger(__name__)

DEFAULT_FAVORITES_LIMIT = 50

_favorites_adapter = TypeAdapter(list[CheatSheetItem])


def load_favorites(path: Path) -> list[CheatSheetItem]:
    """Load favorites from disk."""
    return _favorites_adapter.validate_json(path.read_bytes())


def load_favorites_or_empty(path: Path) -> list[CheatSheetItem]:
    """Load favorites from disk or return an empty list.

    A corrupt file is logged and treated as empty; it is overwritten on the
    next save.
    """
    if not path.exists():
        return []
    try:
        return load_favorites(path)
    except (OSError, ValidationError) as e:
        logger.warning("Ignoring unreadable favorites file %s: %s", path, e)
        return []


def save_favorites(items: list[CheatSheetItem], path: Path) -> None:
    """Save favorites to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(_favorites_adapter.dump_json(items, indent=2))


class FavoritesStore:
    """Most-recent-first list of favorites, saved on every change.

    Two items are the same favorite when command and source match.
    """

    def __init__(self, path: Path, limit: int = DEFAULT_FAVORITES_LIMIT):
        self.path = path
        self.limit = limit
        self._items = load_favorites_or_empty(path)

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> list[CheatSheetItem]:
        return list(self._items)

    def is_favorite(self, item: CheatSheetItem) -> bool:
        return any(self._same(f, item) for f in self._items)

    def add(self, item: CheatSheetItem) -> None:
        if self.is_favorite(item):
            return
        self._items.insert(0, item.model_copy())
        del self._items[self.limit :]
        self._save()

    def remove(self, item: CheatSheetItem) -> None:
        remaining = [f for f in self._items if not self._same(f, item)]
        if len(remaining) != len(self._items):
            self._items = remaining
            self._save()

    def toggle(self, item: CheatSheetItem) -> bool:
        """Add or remove ``item``; returns whether it is now a favorite."""
        if self.is_favorite(item):
            self.remove(item)
            return False
        self.add(item)
        return True

    def search(self, term: str) -> list[CheatSheetItem]:
        term = term.strip().lower()
        if not term:
            return self.all()

        matches = [
            f
            for f in self._items
            if term in f.command.lower()
            or term in f.title.lower()
            or term in f.description.lower()
            or is_fuzzy_match(term, f.command)
            or is_fuzzy_match(term, f.title)
        ]
        return sorted(
            matches,
            key=lambda f: (fuzzy_score(term, f.command), fuzzy_score(term, f.title)),
            reverse=True,
        )

    @staticmethod
    def _same(a: CheatSheetItem, b: CheatSheetItem) -> bool:
        return a.command == b.command and a.source_name == b.source_name

    def _save(self) -> None:
        try:
            save_favorites(self._items, self.path)
        except OSError as e:
            logger.warning("Could not save favorites to %s: %s", self.path, e)
