"""File filtering for the docblock scanner.

This module provides pathspec-based gitignore filtering using
the mature pathspec library.
"""

from docblock_tags.filters.pathspec_filter import (
    PathspecFilter,
    DEFAULT_IGNORE_PATTERNS,
)

__all__ = [
    "PathspecFilter",
    "DEFAULT_IGNORE_PATTERNS",
]
