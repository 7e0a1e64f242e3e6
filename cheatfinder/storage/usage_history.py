"""Command usage history with recency-weighted scoring."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from cheatfinder.data_models import CommandUsage
from cheatfinder.matching import is_fuzzy_match

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100
DEFAULT_MAX_AGE_DAYS = 90
MAX_SEARCH_TERMS = 10
DECAY_DAYS = 30.0
MIN_RECENCY = 0.1
SUGGESTION_MIN_SCORE = 50

_history_adapter = TypeAdapter(dict[str, CommandUsage])


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _key(command: str) -> str:
    return command.strip().lower()


def load_history_or_empty(path: Path) -> dict[str, CommandUsage]:
    if not path.exists():
        return {}
    try:
        return _history_adapter.validate_json(path.read_bytes())
    except (OSError, ValidationError) as e:
        logger.warning("Ignoring unreadable usage history %s: %s", path, e)
        return {}


def save_history(history: dict[str, CommandUsage], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(_history_adapter.dump_json(history, indent=2))


class UsageTracker:
    """Tracks which commands were used and which searches led to them.

    Score decays linearly over 30 days to a floor of 10% of the raw count.
    """

    def __init__(
        self,
        path: Path,
        limit: int = DEFAULT_HISTORY_LIMIT,
        max_age_days: int = DEFAULT_MAX_AGE_DAYS,
        now: Callable[[], datetime] = _utcnow,
    ):
        self.path = path
        self.limit = limit
        self.max_age = timedelta(days=max_age_days)
        self._now = now
        self._usage = load_history_or_empty(path)

    def __len__(self) -> int:
        return len(self._usage)

    def get(self, command: str) -> CommandUsage | None:
        return self._usage.get(_key(command))

    def record_usage(self, command: str, search_term: str | None = None) -> None:
        if not command or not command.strip():
            return

        now = self._now()
        key = _key(command)
        usage = self._usage.get(key)
        if usage is None:
            usage = CommandUsage(command=command.strip(), last_used=now)
            self._usage[key] = usage

        usage.count += 1
        usage.last_used = now

        if search_term and search_term.strip():
            term = search_term.strip().lower()
            if term not in usage.search_terms:
                usage.search_terms.append(term)
                del usage.search_terms[:-MAX_SEARCH_TERMS]

        self._prune()
        self._save()

    def usage_score(self, command: str) -> int:
        if not command or not command.strip():
            return 0
        usage = self._usage.get(_key(command))
        if usage is None:
            return 0
        return self._score(usage)

    def popular_commands(self, limit: int = 10) -> list[str]:
        ranked = sorted(self._usage.values(), key=self._score, reverse=True)
        return [u.command for u in ranked[:limit]]

    def personalized_suggestions(self, term: str, limit: int = 5) -> list[str]:
        """Commands previously reached through a similar search."""
        term = term.strip().lower()
        if not term:
            return []

        matching = [
            u
            for u in self._usage.values()
            if any(
                term in st
                or st in term
                or is_fuzzy_match(term, st, SUGGESTION_MIN_SCORE)
                for st in u.search_terms
            )
        ]
        matching.sort(key=self._score, reverse=True)
        return [u.command for u in matching[:limit]]

    def _score(self, usage: CommandUsage) -> int:
        days = (self._now() - usage.last_used).total_seconds() / 86400
        recency = max(MIN_RECENCY, 1.0 - days / DECAY_DAYS)
        return int(usage.count * recency * 10)

    def _prune(self) -> None:
        cutoff = self._now() - self.max_age
        self._usage = {k: u for k, u in self._usage.items() if u.last_used >= cutoff}

        if len(self._usage) > self.limit:
            top = sorted(self._usage.items(), key=lambda kv: self._score(kv[1]), reverse=True)
            self._usage = dict(top[: self.limit])

    def _save(self) -> None:
        try:
            save_history(self._usage, self.path)
        except OSError as e:
            logger.warning("Could not save usage history to %s: %s", self.path, e)
