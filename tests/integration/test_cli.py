"""Integration tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cheatfinder.__main__ import app

runner = CliRunner()


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("CHEATFINDER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CHEATFINDER_LOG_LEVEL", "WARNING")
    for source in ("CHEATSH", "DEVHINTS", "TLDR"):
        monkeypatch.setenv(f"CHEATFINDER_ENABLE_{source}", "false")
    return tmp_path


class TestCli:
    def test_categories(self) -> None:
        result = runner.invoke(app, ["categories"])
        assert result.exit_code == 0
        assert "terraform" in result.output

    def test_browse_unknown_category(self) -> None:
        result = runner.invoke(app, ["browse", "cobol"])
        assert result.exit_code == 1
        assert "Unknown category" in result.output

    def test_suggest(self) -> None:
        result = runner.invoke(app, ["suggest", "npm"])
        assert result.exit_code == 0
        assert "npm install" in result.output

    def test_search_offline(self, data_dir: Path) -> None:
        result = runner.invoke(app, ["search", "git", "rm"])
        assert result.exit_code == 0
        assert "Results for 'git rm'" in result.output

    def test_use_records_history(self, data_dir: Path) -> None:
        result = runner.invoke(app, ["use", "git status", "--term", "status"])
        assert result.exit_code == 0

        history = json.loads((data_dir / "usage_history.json").read_text())
        assert history["git status"]["count"] == 1
        assert history["git status"]["search_terms"] == ["status"]

    def test_favorite_toggle(self, data_dir: Path) -> None:
        result = runner.invoke(app, ["favorite", "git status"])
        assert result.exit_code == 0
        assert "Added" in result.output

        favorites = json.loads((data_dir / "favorites.json").read_text())
        assert favorites[0]["source_name"] == "Offline (git)"

        result = runner.invoke(app, ["favorite", "git status"])
        assert "Removed" in result.output
        assert json.loads((data_dir / "favorites.json").read_text()) == []
