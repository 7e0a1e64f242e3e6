"""Query routing shared by the CLI and HTTP hosts."""

from __future__ import annotations

import logging

from cheatfinder import offline
from cheatfinder.aggregation import CheatSheetEngine
from cheatfinder.data_models import CheatSheetItem
from cheatfinder.storage import FavoritesStore, UsageTracker

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "cs:"
FAVORITES_COMMANDS = ("cs:fav", "cs:favorites")
POPULAR_COMMANDS = ("cs:popular", "cs:trending")

MAX_LISTED = 12
MAX_POPULAR = 8

PERSONAL_LIMIT = 2
PERSONAL_SCORE = 150
FAVORITES_LIMIT = 2
FAVORITE_BOOST = 50
OFFLINE_LIMIT = 5
OFFLINE_BOOST = 10
ONLINE_LIMIT = 10
SUGGESTION_LIMIT = 5
SUGGESTION_SCORE = 50
DEFAULT_SCORE = 30

# Offline picks shown by cs:popular before any history exists
POPULAR_FALLBACK = (("git", 2), ("docker", 2), ("linux", 2), ("python", 1), ("javascript", 1))

DEFAULT_COMMANDS = (
    ("git status", "Show the working tree status"),
    ("docker ps", "List running containers"),
    ("kubectl get pods", "List pods in kubernetes"),
    ("ls -la", "List files with details"),
    ("npm install", "Install dependencies"),
)


def _boost(item: CheatSheetItem, amount: int) -> CheatSheetItem:
    return item.model_copy(update={"score": item.score + amount})


def _by_score(items: list[CheatSheetItem]) -> list[CheatSheetItem]:
    return sorted(items, key=lambda item: item.score, reverse=True)


class QueryService:
    """Turns a raw query into a ranked result list.

    ``cs:`` commands browse favorites, history and categories; anything
    else merges personal history, favorites, offline and online results.
    """

    def __init__(
        self,
        engine: CheatSheetEngine,
        favorites: FavoritesStore,
        usage: UsageTracker,
    ):
        self.engine = engine
        self.favorites = favorites
        self.usage = usage

    async def handle(self, query: str) -> list[CheatSheetItem]:
        search = query.strip()
        if not search:
            return []

        if search.lower().startswith(COMMAND_PREFIX):
            return await self._handle_command(search.lower())

        return _by_score(await self._merged_results(search))

    def record_usage(self, command: str, search_term: str | None = None) -> None:
        self.usage.record_usage(command, search_term)

    def toggle_favorite(self, item: CheatSheetItem) -> bool:
        return self.favorites.toggle(item)

    # cs: commands

    async def _handle_command(self, command: str) -> list[CheatSheetItem]:
        if command in FAVORITES_COMMANDS:
            return self.favorites.all()[:MAX_LISTED]

        if command in POPULAR_COMMANDS:
            return self._popular()

        category = command[len(COMMAND_PREFIX) :].strip()
        if not category:
            return []

        items = offline.get_by_category(category)
        if items:
            return items[:MAX_LISTED]

        logger.debug("Unknown category %r, searching online", category)
        return (await self.engine.search(category))[:MAX_LISTED]

    def _popular(self) -> list[CheatSheetItem]:
        commands = self.usage.popular_commands(MAX_POPULAR)
        if commands:
            return [
                CheatSheetItem(
                    title=cmd,
                    description="Popular command from your history",
                    command=cmd,
                    source_name="History",
                    score=max(1, self.usage.usage_score(cmd)),
                )
                for cmd in commands
            ]

        return [
            item
            for category, count in POPULAR_FALLBACK
            for item in offline.get_by_category(category)[:count]
        ]

    # Free-text search

    async def _merged_results(self, search: str) -> list[CheatSheetItem]:
        results: list[CheatSheetItem] = [
            CheatSheetItem(
                title=cmd,
                description="Personal suggestion based on your usage",
                command=cmd,
                source_name="Personal",
                score=PERSONAL_SCORE,
            )
            for cmd in self.usage.personalized_suggestions(search, PERSONAL_LIMIT)
        ]

        results += [
            _boost(fav, FAVORITE_BOOST)
            for fav in self.favorites.search(search)[:FAVORITES_LIMIT]
        ]
        results += [
            _boost(item, OFFLINE_BOOST) for item in offline.search(search)[:OFFLINE_LIMIT]
        ]

        online = await self.engine.search(search)
        results += [
            _boost(item, self.usage.usage_score(item.command))
            for item in online[:ONLINE_LIMIT]
        ]

        if results:
            return results

        suggestions = [
            CheatSheetItem(
                title=s,
                description="Press Enter to search",
                command=s,
                source_name="Suggestion",
                score=SUGGESTION_SCORE,
            )
            for s in self.engine.suggest(search)[:SUGGESTION_LIMIT]
        ]
        if suggestions:
            return suggestions

        return [
            CheatSheetItem(
                title=cmd,
                description=desc,
                command=cmd,
                source_name="Default",
                score=DEFAULT_SCORE,
            )
            for cmd, desc in DEFAULT_COMMANDS
        ]
