"""Offline category browsing."""

from fastapi import APIRouter, HTTPException

from cheatfinder import offline
from cheatfinder.api.schemas import CategoriesResponse, CategoryResponse

router = APIRouter(prefix="/categories")


@router.get("", response_model=CategoriesResponse)
async def list_categories() -> CategoriesResponse:
    return CategoriesResponse(categories=offline.categories())


@router.get("/{name}", response_model=CategoryResponse)
async def get_category(name: str) -> CategoryResponse:
    items = offline.get_by_category(name)
    if not items:
        raise HTTPException(status_code=404, detail=f"Unknown category: {name}")
    return CategoryResponse(category=name.lower(), results=items)
