"""Response models for the HTTP API."""

from pydantic import BaseModel

from cheatfinder.data_models import CheatSheetItem


class HealthResponse(BaseModel):
    status: str
    version: str
    sources: dict[str, bool]
    cache_entries: int


class SearchResponse(BaseModel):
    query: str
    count: int
    results: list[CheatSheetItem]


class SuggestResponse(BaseModel):
    query: str
    suggestions: list[str]


class CategoriesResponse(BaseModel):
    categories: list[str]


class CategoryResponse(BaseModel):
    category: str
    results: list[CheatSheetItem]
