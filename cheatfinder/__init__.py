"""Command cheat sheet aggregation: online sources, offline catalog and history."""

__version__ = "0.1.0"
