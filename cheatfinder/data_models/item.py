"""Normalized cheat sheet result."""

from pydantic import BaseModel, ConfigDict, Field


class CheatSheetItem(BaseModel):
    """A single command snippet from any source.

    Items are frozen once scored; hosts that want a different score or
    title take a copy via ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    command: str = Field(..., min_length=1)
    url: str = ""
    source_name: str
    score: int = Field(default=1, ge=1)

    @property
    def dedup_key(self) -> tuple[str, str]:
        return (self.source_name, self.command)

    @property
    def is_offline(self) -> bool:
        return self.url.startswith("offline://")
