"""YAML frontmatter parsing utilities.

Agent and skill markdown files may start with a YAML block delimited by
'---' markers:

    ```yaml
    ---
    name: api-designer
    model: sonnet
    skills: [api-contracts]
    ---

    # Agent prompt
    ```
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict

import yaml

from sdd.core.exceptions import ParseError


# Matches content between the first pair of '---' markers at the start of a file.
FRONTMATTER_PATTERN = re.compile(
    r"^---\s*\n(.*?)\n---[ \t]*(?:\n|$)",
    re.DOTALL,
)


@dataclass
class ParsedDocument:
    """Result of parsing a document with YAML frontmatter.

    Attributes:
        frontmatter: Parsed YAML frontmatter as a dictionary
        content: The markdown content after the frontmatter
        raw_frontmatter: The raw YAML string
        found: Whether a delimited block was present
    """
    frontmatter: Dict[str, Any]
    content: str
    raw_frontmatter: str
    found: bool = False


def parse_frontmatter(content: str) -> ParsedDocument:
    """Parse YAML frontmatter from markdown content.

    Args:
        content: Full markdown content including frontmatter

    Returns:
        ParsedDocument with frontmatter dict, content, and raw YAML. When no
        block is present the frontmatter is empty and content is unchanged.

    Raises:
        ParseError: If the block holds invalid YAML or is not a mapping

    Example:
        >>> doc = parse_frontmatter('''---
        ... name: reviewer
        ... ---
        ...
        ... # Reviewer
        ... ''')
        >>> doc.frontmatter['name']
        'reviewer'
    """
    match = FRONTMATTER_PATTERN.match(content)

    if not match:
        return ParsedDocument(frontmatter={}, content=content, raw_frontmatter="")

    raw_yaml = match.group(1)
    remaining_content = content[match.end():]

    try:
        parsed = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML in frontmatter: {e}") from e
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise ParseError(f"Frontmatter must be a YAML mapping, got {type(parsed).__name__}")

    return ParsedDocument(
        frontmatter=parsed,
        content=remaining_content,
        raw_frontmatter=raw_yaml,
        found=True,
    )


__all__ = [
    "ParsedDocument",
    "parse_frontmatter",
    "FRONTMATTER_PATTERN",
]
