"""Tests for the tldr adapter."""

import httpx
import pytest

from cheatfinder.sources import TldrAdapter
from cheatfinder.sources.tldr import platform_priority

TAR_PAGE = """\
# tar

> Archiving utility.
> More information: <https://www.gnu.org/software/tar>.

- Create an archive from files:

`tar cf {{path/to/target.tar}} {{path/to/file1}}`

- Extract an archive in the current directory:

`tar xf {{path/to/source.tar}}`
"""

PAGES_PREFIX = "/tldr-pages/tldr/main/pages/"


def _serve_pages(pages: dict[str, str], seen: list[str]):
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix(PAGES_PREFIX)
        seen.append(path)
        if path in pages:
            return httpx.Response(200, text=pages[path])
        return httpx.Response(404, text="404: Not Found")

    return handler


class TestPlatformPriority:
    def test_common_first_then_host(self) -> None:
        assert platform_priority("Linux") == ["common", "linux", "osx", "windows"]
        assert platform_priority("Darwin") == ["common", "osx", "linux", "windows"]
        assert platform_priority("Windows") == ["common", "windows", "linux", "osx"]


class TestTldrAdapter:
    @pytest.mark.asyncio
    async def test_parses_examples(self, mock_client) -> None:
        seen: list[str] = []
        client = mock_client(_serve_pages({"common/tar.md": TAR_PAGE}, seen))
        adapter = TldrAdapter(client=client, platform_name="Linux")
        result = await adapter.fetch("tar")

        assert result.ok
        assert [i.command for i in result.items] == [
            "tar cf path/to/target.tar path/to/file1",
            "tar xf path/to/source.tar",
        ]
        first = result.items[0]
        assert first.title == first.command
        assert first.description == "Create an archive from files:"
        assert first.source_name == "tldr (common)"
        assert first.url == "https://tldr.inbrowser.app/pages/common/tar"
        assert seen == ["common/tar.md"]

    @pytest.mark.asyncio
    async def test_falls_back_to_host_platform(self, mock_client) -> None:
        seen: list[str] = []
        client = mock_client(_serve_pages({"linux/tar.md": TAR_PAGE}, seen))
        adapter = TldrAdapter(client=client, platform_name="Linux")
        result = await adapter.fetch("tar")

        assert seen == ["common/tar.md", "linux/tar.md"]
        assert all(i.source_name == "tldr (linux)" for i in result.items)

    @pytest.mark.asyncio
    async def test_tries_command_variations(self, mock_client) -> None:
        seen: list[str] = []
        client = mock_client(_serve_pages({"common/git-rm.md": TAR_PAGE}, seen))
        adapter = TldrAdapter(client=client, platform_name="Linux")
        result = await adapter.fetch("git rm file")

        assert result.items
        # 4 platforms for "git rm file", 4 for "git-rm-file", then a hit
        assert len(seen) == 9
        assert seen[-1] == "common/git-rm.md"
        assert result.items[0].url.endswith("/common/git-rm")

    @pytest.mark.asyncio
    async def test_no_page_anywhere(self, mock_client) -> None:
        seen: list[str] = []
        adapter = TldrAdapter(client=mock_client(_serve_pages({}, seen)))
        result = await adapter.fetch("nosuchtool")

        assert result.ok
        assert result.items == []
        assert len(seen) == 4

    @pytest.mark.asyncio
    async def test_example_without_description_is_skipped(self, mock_client) -> None:
        page = "# x\n\n`x --orphan`\n\n- Described:\n\n`x --described`\n"
        seen: list[str] = []
        adapter = TldrAdapter(client=mock_client(_serve_pages({"common/x.md": page}, seen)))
        result = await adapter.fetch("x")

        assert [i.command for i in result.items] == ["x --described"]


@pytest.mark.external
class TestLiveSources:
    @pytest.mark.asyncio
    async def test_tldr_tar(self) -> None:
        adapter = TldrAdapter()
        try:
            result = await adapter.fetch("tar")
        finally:
            await adapter.close()
        assert result.ok
        assert result.items
