import os
from pathlib import Path

ENV_FILE_VAR = "CHEATFINDER_ENV_FILE"
ENV_FILE_CANDIDATES = ("config/.env.dev", "config/.env")


def _find_project_root() -> Path:
    """Nearest directory above this package holding pyproject.toml or .git."""
    here = Path(__file__).resolve().parent
    for parent in here.parents:
        if (parent / "pyproject.toml").is_file() or (parent / ".git").is_dir():
            return parent
    return Path.cwd()


def resolve_env_file_path() -> Path | None:
    """Resolve the .env file to load, if any.

    ``CHEATFINDER_ENV_FILE`` wins (relative paths are taken from the
    project root); otherwise the first existing ``config/.env.dev`` or
    ``config/.env``.
    """
    root = _find_project_root()

    explicit = os.environ.get(ENV_FILE_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = root / path
        if path.is_file():
            return path

    for candidate in ENV_FILE_CANDIDATES:
        path = root / candidate
        if path.is_file():
            return path
    return None


def default_data_dir() -> Path:
    """Directory for favorites and usage history.

    ``$XDG_DATA_HOME/cheatfinder`` when set, else ``~/.cheatfinder``.
    """
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "cheatfinder"
    return Path.home() / ".cheatfinder"
