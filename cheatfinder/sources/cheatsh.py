from __future__ import annotations

import re
from urllib.parse import quote

import httpx

from cheatfinder.data_models import CheatSheetItem
from cheatfinder.matching import relevance_score
from cheatfinder.preprocessing import clean_command_syntax, truncate

from .base import DEFAULT_TIMEOUT, HttpSource, SourceContentError

BASE_URL = "https://cheat.sh"
MAX_RESULTS = 15
MAX_TITLE_LENGTH = 80
DEFAULT_DESCRIPTION = "From cheat.sh"

HTML_PAGE_MARKERS = ("<html", "<head>", "<title>")
HTML_LINE_MARKERS = ("<head>", "<title>", "</title>", "</head>")
HTML_TAG = re.compile(r"<[^>]+>")
COMMENT_PREFIXES = ("#", "//", ">")


def looks_like_html(payload: str) -> bool:
    lower = payload.lower()
    return lower.lstrip().startswith("<!doctype") or any(
        marker in lower for marker in HTML_PAGE_MARKERS
    )


class CheatShAdapter(HttpSource):
    """cheat.sh plain-text adapter.

    Comment lines (``#``, ``//``, ``>``) describe the command line that
    follows them.
    """

    name = "cheatsh"
    source_name = "cheat.sh"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = BASE_URL,
        max_results: int = MAX_RESULTS,
    ):
        super().__init__(client, timeout)
        self.base_url = base_url.rstrip("/")
        self.max_results = max_results

    @staticmethod
    def encode_term(term: str) -> str:
        return quote(term, safe="").replace("%20", "+")

    async def _search(self, term: str) -> list[CheatSheetItem]:
        encoded = self.encode_term(term)
        payload = await self._get_text(f"{self.base_url}/{encoded}?T")
        if not payload or not payload.strip():
            return []

        if looks_like_html(payload):
            raise SourceContentError("HTML page instead of plain text")

        return self._parse_response(payload, term, f"{self.base_url}/{encoded}")

    def _parse_response(
        self,
        payload: str,
        term: str,
        page_url: str,
    ) -> list[CheatSheetItem]:
        results: list[CheatSheetItem] = []
        description = ""

        for raw in payload.split("\n"):
            if len(results) >= self.max_results:
                break

            line = raw.rstrip()
            if not line.strip():
                continue

            if line.startswith(COMMENT_PREFIXES):
                description = line.lstrip("#/> ").strip()
                continue

            lower = line.lower()
            if "://cheat.sh" in lower:
                continue
            if HTML_TAG.search(line) or any(m in lower for m in HTML_LINE_MARKERS):
                continue

            if line.startswith("$"):
                line = line.lstrip("$").lstrip()

            command = clean_command_syntax(line)
            if not command:
                continue

            results.append(
                CheatSheetItem(
                    title=truncate(command, MAX_TITLE_LENGTH),
                    description=description or DEFAULT_DESCRIPTION,
                    command=command,
                    url=page_url,
                    source_name=self.source_name,
                    score=relevance_score(term, command, description),
                )
            )
            description = ""

        return results
