"""Text processing utilities."""
from __future__ import annotations

from .frontmatter import (
    FRONTMATTER_PATTERN,
    ParsedDocument,
    parse_frontmatter,
)

__all__ = [
    "FRONTMATTER_PATTERN",
    "ParsedDocument",
    "parse_frontmatter",
]
