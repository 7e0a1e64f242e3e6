from __future__ import annotations

import platform as host_platform

import httpx

from cheatfinder.data_models import CheatSheetItem
from cheatfinder.matching import relevance_score
from cheatfinder.preprocessing import clean_command_syntax, command_variations

from .base import DEFAULT_TIMEOUT, HttpSource

RAW_BASE_URL = "https://raw.githubusercontent.com/tldr-pages/tldr/main/pages"
PAGE_BASE_URL = "https://tldr.inbrowser.app/pages"
TLDR_PLATFORMS = ("common", "linux", "osx", "windows")


def host_platform_family(system: str | None = None) -> str:
    """Map ``platform.system()`` onto a tldr page directory."""
    system = system if system is not None else host_platform.system()
    if system == "Windows":
        return "windows"
    if system == "Darwin":
        return "osx"
    return "linux"


def platform_priority(system: str | None = None) -> list[str]:
    """``common`` first, then the host's family, then the rest."""
    family = host_platform_family(system)
    rest = [p for p in TLDR_PLATFORMS if p not in ("common", family)]
    return ["common", family, *rest]


class TldrAdapter(HttpSource):
    """tldr-pages adapter.

    Tries each command variation against each platform directory and stops
    at the first page that yields examples.
    """

    name = "tldr"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        raw_base_url: str = RAW_BASE_URL,
        page_base_url: str = PAGE_BASE_URL,
        platform_name: str | None = None,
    ):
        super().__init__(client, timeout)
        self.raw_base_url = raw_base_url.rstrip("/")
        self.page_base_url = page_base_url.rstrip("/")
        self.platforms = platform_priority(platform_name)

    async def _search(self, term: str) -> list[CheatSheetItem]:
        for token in command_variations(term):
            for platform in self.platforms:
                content = await self._get_text(
                    f"{self.raw_base_url}/{platform}/{token}.md"
                )
                if not content or not content.strip():
                    continue

                results = self._parse_page(content, term, platform, token)
                if results:
                    return results

        return []

    def _parse_page(
        self,
        content: str,
        term: str,
        platform: str,
        token: str,
    ) -> list[CheatSheetItem]:
        results: list[CheatSheetItem] = []
        description: str | None = None

        for raw_line in content.split("\n"):
            line = raw_line.strip()

            if line.startswith("- "):
                description = line[2:].strip()
            elif line.startswith("`") and description is not None:
                command = clean_command_syntax(line.strip("`").strip())
                if command:
                    results.append(
                        CheatSheetItem(
                            title=command,
                            description=description,
                            command=command,
                            url=f"{self.page_base_url}/{platform}/{token}",
                            source_name=f"tldr ({platform})",
                            score=relevance_score(term, command, description),
                        )
                    )
                description = None

        return results
