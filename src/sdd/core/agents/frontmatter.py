"""Agent frontmatter extraction.

Reads an agent markdown file and returns the structured metadata from its
leading YAML block. The markdown body is never returned.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from sdd.core.exceptions import FrontmatterError, PathNotFound
from sdd.core.utils.io import read_text
from sdd.core.utils.text import parse_frontmatter

AGENT_FIELDS = ("name", "model", "tools", "skills", "description")


def agent_frontmatter(agent_path: Path) -> Dict[str, Any]:
    """Return the agent metadata fields present in ``agent_path``.

    Only truthy values among ``name``, ``model``, ``tools``, ``skills`` and
    ``description`` are included.

    Raises:
        PathNotFound: the file does not exist
        FrontmatterError: the file has no leading ``---`` block
        ParseError: the file is not UTF-8 or the block is not a valid YAML mapping
    """
    resolved = Path(agent_path).resolve()
    if not resolved.is_file():
        raise PathNotFound(f"Agent file not found: {resolved}", context={"path": str(resolved)})

    doc = parse_frontmatter(read_text(resolved))
    if not doc.found:
        raise FrontmatterError(
            f"No YAML frontmatter found in {resolved}",
            context={"path": str(resolved)},
        )

    return {key: doc.frontmatter[key] for key in AGENT_FIELDS if doc.frontmatter.get(key)}


__all__ = ["AGENT_FIELDS", "agent_frontmatter"]
