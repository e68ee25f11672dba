"""Skill and agent content loading."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from sdd.core.agents import agent_frontmatter
from sdd.core.exceptions import (
    ParseError,
    PathNotFound,
    UnresolvedAgentReference,
    UnresolvedSkillReference,
)
from sdd.core.utils.io import read_text

from .manifest import Manifest

logger = logging.getLogger(__name__)

TECHPACK_ROOT_PLACEHOLDER = "<techpack-root>"


def substitute_techpack_root(content: str, techpack_dir: Path) -> str:
    """Replace every literal ``<techpack-root>`` with ``techpack_dir``.

    Single pass: no escaping, no recursive expansion, no other placeholders.
    """
    return content.replace(TECHPACK_ROOT_PLACEHOLDER, str(techpack_dir))


def load_skill(manifest: Manifest, techpack_dir: Path, skill_name: str) -> Dict[str, Any]:
    """Read a skill file with ``<techpack-root>`` resolved."""
    relative_path = manifest.skills.get(skill_name)
    if relative_path is None:
        raise UnresolvedSkillReference(
            f'Skill "{skill_name}" not found in skills registry',
            missing=[skill_name],
        )

    full_path = Path(techpack_dir) / relative_path
    if not full_path.is_file():
        raise PathNotFound(f"Skill file not found: {full_path}", context={"path": str(full_path)})

    logger.debug("Loading skill %s from %s", skill_name, full_path)
    return {
        "name": skill_name,
        "path": str(full_path),
        "content": substitute_techpack_root(read_text(full_path), techpack_dir),
    }


def load_agent(manifest: Manifest, techpack_dir: Path, agent_name: str) -> Dict[str, Any]:
    """Return agent metadata with its frontmatter skills resolved to paths."""
    relative_path = manifest.agents.get(agent_name)
    if relative_path is None:
        raise UnresolvedAgentReference(
            f'Agent "{agent_name}" not found in agents registry',
            missing=[agent_name],
        )

    full_path = Path(techpack_dir) / relative_path
    fm = agent_frontmatter(full_path)

    raw_skills = fm.get("skills") or []
    if isinstance(raw_skills, str):
        raw_skills = [raw_skills]
    elif not isinstance(raw_skills, list):
        raise ParseError(
            f'Agent "{agent_name}": "skills" must be a list of skill names',
            context={"path": str(full_path), "skills": repr(raw_skills)},
        )

    skills: List[Dict[str, str]] = []
    for skill_name in raw_skills:
        skill_rel = manifest.skills.get(str(skill_name))
        if skill_rel is None:
            raise UnresolvedSkillReference(
                f'Agent "{agent_name}" references skill "{skill_name}" not found in skills registry',
                missing=[str(skill_name)],
            )
        skills.append({"name": str(skill_name), "path": str(Path(techpack_dir) / skill_rel)})

    return {
        "name": fm.get("name", agent_name),
        "description": fm.get("description"),
        "model": fm.get("model"),
        "tools": fm.get("tools"),
        "skills": skills,
        "prompt": str(full_path),
    }


__all__ = [
    "TECHPACK_ROOT_PLACEHOLDER",
    "substitute_techpack_root",
    "load_skill",
    "load_agent",
]
