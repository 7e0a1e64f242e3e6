"""Cleanup of raw command lines scraped from cheat sheet sources."""

from __future__ import annotations

import re

# Markup that sometimes leaks into plain-text responses
HTML_TAG_PAIR = re.compile(r"<[^>]+>.*?</[^>]+>")
HTML_TAG = re.compile(r"<[^>]+>")

# tldr placeholder syntax: {{[-A|--all]}} and {{path/to/file}}
DOUBLE_BRACE_OPTION = re.compile(r"\{\{(\[.*?\])\}\}")
DOUBLE_BRACE_LITERAL = re.compile(r"\{\{([^{}]+)\}\}")

LEADING_PROMPT = re.compile(r"^\s*\$\s*")
LEADING_HASH = re.compile(r"^\s*#\s*")
WHITESPACE_RUN = re.compile(r"\s+")
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")
BARE_URL = re.compile(r"https?://\S+")

# URLs are the point of these commands, keep them
CLONE_COMMANDS = ("git clone", "hg clone")

ELLIPSIS = "…"


def clean_command_syntax(command: str | None) -> str:
    """Normalize a command line for display and copying.

    Returns an empty string when nothing usable is left; callers drop the
    line in that case.
    """
    if not command or not command.strip():
        return ""

    text = HTML_TAG_PAIR.sub("", command)
    text = HTML_TAG.sub("", text)

    text = DOUBLE_BRACE_OPTION.sub(r"\1", text)
    text = DOUBLE_BRACE_LITERAL.sub(r"\1", text)

    text = LEADING_PROMPT.sub("", text)
    text = LEADING_HASH.sub("", text)

    # Literal two-character escapes, not real control characters
    text = text.replace("\\n", " ").replace("\\t", " ")
    text = WHITESPACE_RUN.sub(" ", text)
    text = ANSI_ESCAPE.sub("", text)

    if "http" in text and not text.lower().startswith(CLONE_COMMANDS):
        text = BARE_URL.sub("", text).strip()

    text = _unwrap(text, "`")
    text = _unwrap(text, '"')

    return text.strip()


def _unwrap(text: str, quote: str) -> str:
    """Remove one pair of quotes wrapping the whole command."""
    wrapped = text.startswith(quote) and text.endswith(quote)
    if len(text) >= 2 and wrapped and text.count(quote) == 2:
        return text[1:-1]
    return text


def truncate(value: str, max_length: int) -> str:
    """Shorten ``value`` to ``max_length`` characters including the ellipsis."""
    if len(value) <= max_length:
        return value
    return value[: max_length - 1] + ELLIPSIS


def slugify(term: str) -> str:
    """Lowercase alphanumerics joined by single hyphens: "Git RM" -> "git-rm"."""
    return re.sub(r"[\W_]+", "-", term.strip().lower()).strip("-")


def command_variations(search_term: str) -> list[str]:
    """Page names worth trying for a multi-word search.

    "git rm file" -> ["git rm file", "git-rm-file", "git-rm", "git"]
    """
    trimmed = search_term.strip().lower()
    variations = [trimmed]

    words = trimmed.split()
    if len(words) > 1:
        variations.append("-".join(words))
        variations.append(f"{words[0]}-{words[1]}")
        variations.append(words[0])

    return list(dict.fromkeys(v for v in variations if v))
