from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cheatfinder.data_models import SourceOptions

from ._utils import default_data_dir, resolve_env_file_path


class Settings(BaseSettings):
    """Cheat sheet finder configuration."""

    log_level: str = "INFO"

    # Online sources
    enable_cheatsh: bool = True
    enable_devhints: bool = True
    enable_tldr: bool = True

    # Non-positive values fall back to the 2h default in SourceOptions
    cache_duration_hours: float = 12.0
    cache_sweep_interval: float = Field(default=300.0, gt=0)

    # Per-request timeout must stay below the overall deadline
    request_timeout: float = Field(default=6.0, gt=0)
    search_deadline: float = Field(default=8.0, gt=0)
    user_agent: str = "CheatSheetsFinder/1.0"

    # Local persistence
    data_dir: Path = Field(default_factory=default_data_dir)
    favorites_limit: int = 50
    history_limit: int = 100
    history_max_age_days: int = 90

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="CHEATFINDER_",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _timeout_below_deadline(self) -> "Settings":
        if self.request_timeout >= self.search_deadline:
            raise ValueError(
                f"request_timeout ({self.request_timeout}s) must be shorter than "
                f"search_deadline ({self.search_deadline}s)"
            )
        return self

    @property
    def favorites_path(self) -> Path:
        return self.data_dir / "favorites.json"

    @property
    def history_path(self) -> Path:
        return self.data_dir / "usage_history.json"

    def source_options(self) -> SourceOptions:
        """Build the immutable options snapshot for one aggregation call."""
        return SourceOptions(
            enable_cheatsh=self.enable_cheatsh,
            enable_devhints=self.enable_devhints,
            enable_tldr=self.enable_tldr,
            cache_duration=timedelta(hours=self.cache_duration_hours),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    get_settings.cache_clear()
