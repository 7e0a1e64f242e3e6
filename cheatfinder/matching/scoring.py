"""Relevance scoring shared by the online sources."""

from __future__ import annotations

BASE_SCORE = 50
LONG_COMMAND_LENGTH = 100

# Commands people reach for most; a match gets a small boost
POPULAR_COMMAND_PREFIXES: tuple[str, ...] = (
    # git
    "git add", "git commit", "git push", "git pull", "git reset",
    "git log", "git rm", "git mv", "git checkout", "git branch",
    # containers
    "docker run", "docker build", "docker ps", "docker exec", "docker compose",
    "kubectl get", "kubectl apply", "kubectl describe", "kubectl logs",
    # package managers
    "npm install", "npm run", "yarn add", "yarn install",
    # unix
    "ls", "cd", "mkdir", "rm", "cp", "mv", "grep", "find", "sed", "awk",
)

_WORD_JOINERS = (" ", "-", "_")


def is_popular_command(command: str) -> bool:
    return command.lower().startswith(POPULAR_COMMAND_PREFIXES)


def relevance_score(search_term: str, command: str | None, description: str | None) -> int:
    """Score how well a command snippet answers a search term.

    Always returns at least 1.
    """
    score = BASE_SCORE
    search = search_term.strip().lower()
    command_lower = (command or "").lower()
    description_lower = (description or "").lower()

    if command_lower == search:
        score += 100
    elif command_lower.startswith(search):
        score += 80
    elif search in command_lower:
        score += 50

    if search and search in description_lower:
        score += 25

    words = search.split()
    matched_words = 0

    for word in words:
        if len(word) < 2:
            continue

        # Longer words are more specific
        word_bonus = min(len(word) * 2, 20)

        if command_lower.startswith(word):
            score += word_bonus * 2
            matched_words += 1
        elif _contains_delimited(command_lower, word):
            score += word_bonus
            matched_words += 1
        elif word in command_lower:
            score += word_bonus // 2
            matched_words += 1

        if word in description_lower:
            score += min(word_bonus // 3, 5)

    if len(words) > 1 and matched_words > 1:
        score += matched_words * 10

    if command is not None and len(command) > LONG_COMMAND_LENGTH:
        score -= 10

    if is_popular_command(command_lower):
        score += 15

    return max(score, 1)


def _contains_delimited(command: str, word: str) -> bool:
    """True if ``word`` appears right after or right before a word joiner."""
    return any(
        f"{joiner}{word}" in command or f"{word}{joiner}" in command
        for joiner in _WORD_JOINERS
    )
