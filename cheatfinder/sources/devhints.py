from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from cheatfinder.data_models import CheatSheetItem
from cheatfinder.matching import relevance_score
from cheatfinder.preprocessing import slugify

from .base import DEFAULT_TIMEOUT, HttpSource

RAW_BASE_URL = "https://raw.githubusercontent.com/rstacruz/cheatsheets/master"
PAGE_BASE_URL = "https://devhints.io"
DEFAULT_DESCRIPTION = "Snippet from DevHints"
FALLBACK_SCORE = 40


@dataclass
class _Section:
    """A ``### `` section being accumulated."""

    title: str
    code_lines: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def command(self) -> str:
        return next((line for line in self.code_lines if line.strip()), "").strip()


class DevHintsAdapter(HttpSource):
    """DevHints adapter reading the raw markdown of rstacruz/cheatsheets.

    Each ``### `` section with a fenced code block becomes one item: the
    first code line is the command, the first prose line the description.
    """

    name = "devhints"
    source_name = "DevHints"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        raw_base_url: str = RAW_BASE_URL,
        page_base_url: str = PAGE_BASE_URL,
    ):
        super().__init__(client, timeout)
        self.raw_base_url = raw_base_url.rstrip("/")
        self.page_base_url = page_base_url.rstrip("/")

    async def _search(self, term: str) -> list[CheatSheetItem]:
        slug = slugify(term)
        if not slug:
            return []

        content = await self._get_text(f"{self.raw_base_url}/{slug}.md")
        if not content or not content.strip():
            return []

        page_url = f"{self.page_base_url}/{slug}"
        results = self._parse_markdown(content, term, page_url)
        if results:
            return results

        # Page exists but has no usable sections; point the user to it
        return [
            CheatSheetItem(
                title=f"Open DevHints page for {term}",
                description="Open the DevHints cheat sheet in your browser.",
                command=page_url,
                url=page_url,
                source_name=self.source_name,
                score=FALLBACK_SCORE,
            )
        ]

    def _parse_markdown(
        self,
        content: str,
        term: str,
        page_url: str,
    ) -> list[CheatSheetItem]:
        results: list[CheatSheetItem] = []
        section: _Section | None = None
        in_code_block = False

        for raw_line in content.split("\n"):
            line = raw_line.rstrip("\r")

            if line.startswith("---"):
                continue

            if line.startswith("### "):
                self._commit(section, term, page_url, results)
                title = line[4:].strip()
                if title.startswith("`") and title.endswith("`"):
                    title = title.strip("` ")
                section = _Section(title=title)
                in_code_block = False
                continue

            if line.startswith("```"):
                in_code_block = not in_code_block
                continue

            if section is None:
                continue

            if in_code_block:
                section.code_lines.append(line.strip())
                continue

            if not line.strip() or line.startswith("####"):
                continue

            if not section.description:
                section.description = line.strip()

        self._commit(section, term, page_url, results)
        return results

    def _commit(
        self,
        section: _Section | None,
        term: str,
        page_url: str,
        results: list[CheatSheetItem],
    ) -> None:
        if section is None or not section.title or not section.code_lines:
            return

        command = section.command
        if not command:
            return

        description = section.description or DEFAULT_DESCRIPTION
        results.append(
            CheatSheetItem(
                title=section.title,
                description=description,
                command=command,
                url=page_url,
                source_name=self.source_name,
                score=relevance_score(term, command, description),
            )
        )
