"""Text preprocessing for scraped command lines."""

from .command_cleaner import (
    clean_command_syntax,
    command_variations,
    slugify,
    truncate,
)

__all__ = [
    "clean_command_syntax",
    "command_variations",
    "slugify",
    "truncate",
]
