"""Agent prompt file helpers."""
from __future__ import annotations

from .frontmatter import AGENT_FIELDS, agent_frontmatter

__all__ = ["AGENT_FIELDS", "agent_frontmatter"]
