"""Tests for the DevHints adapter."""

import httpx
import pytest

from cheatfinder.sources import DevHintsAdapter

MARKDOWN = """\
---
title: Git
category: Git
---

### Getting started
Start a repository.

```bash
git init
```

### `Branches`

#### Listing

```

git branch
git branch -d old
```

### Prose only
No code in this section.
"""


def _serve(body: str, status: int = 200, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, text=body)

    return handler


class TestDevHintsAdapter:
    @pytest.mark.asyncio
    async def test_parses_sections(self, mock_client) -> None:
        adapter = DevHintsAdapter(client=mock_client(_serve(MARKDOWN)))
        result = await adapter.fetch("git")

        assert result.ok
        assert [i.title for i in result.items] == ["Getting started", "Branches"]
        assert [i.command for i in result.items] == ["git init", "git branch"]
        assert result.items[0].description == "Start a repository."
        assert result.items[1].description == "Snippet from DevHints"
        assert all(i.source_name == "DevHints" for i in result.items)
        assert all(i.url == "https://devhints.io/git" for i in result.items)

    @pytest.mark.asyncio
    async def test_requests_slugified_raw_file(self, mock_client) -> None:
        seen: list[httpx.Request] = []
        adapter = DevHintsAdapter(client=mock_client(_serve("", seen=seen)))
        await adapter.fetch("Git RM")

        assert seen[0].url.host == "raw.githubusercontent.com"
        assert seen[0].url.path == "/rstacruz/cheatsheets/master/git-rm.md"

    @pytest.mark.asyncio
    async def test_page_without_sections_falls_back_to_link(self, mock_client) -> None:
        adapter = DevHintsAdapter(client=mock_client(_serve("# Vim\n\nSome text.\n")))
        result = await adapter.fetch("vim")

        assert len(result.items) == 1
        item = result.items[0]
        assert item.title == "Open DevHints page for vim"
        assert item.command == "https://devhints.io/vim"
        assert item.score == 40

    @pytest.mark.asyncio
    async def test_missing_page_has_no_fallback(self, mock_client) -> None:
        adapter = DevHintsAdapter(client=mock_client(_serve("Not Found", 404)))
        result = await adapter.fetch("nosuchsheet")
        assert result.ok
        assert result.items == []

    @pytest.mark.asyncio
    async def test_unsluggable_term_makes_no_request(self, mock_client) -> None:
        seen: list[httpx.Request] = []
        adapter = DevHintsAdapter(client=mock_client(_serve(MARKDOWN, seen=seen)))
        result = await adapter.fetch("???")

        assert result.items == []
        assert seen == []
