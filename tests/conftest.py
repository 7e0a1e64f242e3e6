"""Root pytest configuration.

Tests marked ``external`` talk to the real cheat sheet sources and are
skipped unless enabled:

    --run-external       Run tests against cheat.sh, DevHints and tldr
    RUN_EXTERNAL=1       Same, via environment
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest

from cheatfinder.config import Settings, clear_settings_cache


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-external",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.external",
    )


def pytest_collection_modifyitems(config, items):
    """Skip external tests unless explicitly enabled."""
    run_external = config.getoption("--run-external") or os.environ.get(
        "RUN_EXTERNAL",
        "",
    ).lower() in ("1", "true", "yes")

    if run_external:
        return

    skip_external = pytest.mark.skip(
        reason="External test - run with --run-external or RUN_EXTERNAL=1",
    )
    for item in items:
        if "external" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_external)


@pytest.fixture(autouse=True)
def _isolate_settings_cache() -> Generator[None, None, None]:
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def offline_settings(tmp_path: Path) -> Settings:
    """Settings with every online source disabled and a temporary data dir."""
    return Settings(
        _env_file=None,
        enable_cheatsh=False,
        enable_devhints=False,
        enable_tldr=False,
        data_dir=tmp_path,
    )


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Factory for an AsyncClient answering through ``handler``."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
