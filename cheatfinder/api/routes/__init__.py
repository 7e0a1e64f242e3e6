"""API route handlers."""

from cheatfinder.api.routes import categories, health, search

__all__ = ["categories", "health", "search"]
