from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


class CommandUsage(BaseModel):
    """How often and how recently a command was used."""

    command: str
    count: int = 0
    last_used: datetime
    search_terms: list[str] = Field(default_factory=list)

    @field_validator("last_used")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps (older history files) are read as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
