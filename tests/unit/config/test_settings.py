"""Tests for settings."""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from cheatfinder.config import Settings, get_settings
from cheatfinder.config._utils import default_data_dir, resolve_env_file_path


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.enable_cheatsh and settings.enable_devhints and settings.enable_tldr
        assert settings.cache_duration_hours == 12.0
        assert settings.request_timeout < settings.search_deadline
        assert settings.favorites_limit == 50
        assert settings.history_limit == 100

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHEATFINDER_ENABLE_TLDR", "false")
        monkeypatch.setenv("CHEATFINDER_CACHE_DURATION_HOURS", "1.5")

        settings = Settings(_env_file=None)

        assert settings.enable_tldr is False
        assert settings.cache_duration_hours == 1.5

    def test_source_options(self) -> None:
        options = Settings(_env_file=None, enable_devhints=False).source_options()

        assert options.enable_cheatsh
        assert not options.enable_devhints
        assert options.cache_duration == timedelta(hours=12)

    def test_data_paths(self, tmp_path: Path) -> None:
        settings = Settings(_env_file=None, data_dir=tmp_path)
        assert settings.favorites_path == tmp_path / "favorites.json"
        assert settings.history_path == tmp_path / "usage_history.json"

    def test_request_timeout_must_be_below_deadline(self) -> None:
        with pytest.raises(ValidationError, match="search_deadline"):
            Settings(_env_file=None, request_timeout=30, search_deadline=8)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout=8, search_deadline=8)

    def test_custom_timeouts(self) -> None:
        settings = Settings(_env_file=None, request_timeout=2, search_deadline=3)
        assert (settings.request_timeout, settings.search_deadline) == (2, 3)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestPaths:
    def test_default_data_dir_uses_xdg(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert default_data_dir() == tmp_path / "cheatfinder"

    def test_default_data_dir_falls_back_to_home(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        assert default_data_dir() == Path.home() / ".cheatfinder"

    def test_explicit_env_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("CHEATFINDER_LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("CHEATFINDER_ENV_FILE", str(env_file))

        assert resolve_env_file_path() == env_file
        assert Settings(_env_file=env_file).log_level == "DEBUG"

    def test_missing_explicit_env_file_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("CHEATFINDER_ENV_FILE", str(tmp_path / "nope.env"))
        assert resolve_env_file_path() != tmp_path / "nope.env"
