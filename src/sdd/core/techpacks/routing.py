"""Routing queries over a loaded manifest.

All lookups fail closed: a name that is declared but does not resolve in its
registry is always an error, never silently dropped. A phase the manifest
does not mention is different: the tech pack simply contributes nothing to it.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence

from sdd.core.exceptions import (
    UnknownAction,
    UnknownCommandNamespace,
    UnknownComponent,
    UnresolvedAgentReference,
    UnresolvedSkillReference,
)

from .manifest import Manifest


class ResolvedRefs(NamedTuple):
    resolved: List[Dict[str, str]]
    missing: List[str]


def resolve_names(names: Sequence[str], registry: Mapping[str, str], techpack_dir: Path) -> ResolvedRefs:
    """Map registry names to ``{name, path}`` refs, collecting misses."""
    resolved: List[Dict[str, str]] = []
    missing: List[str] = []
    for name in names:
        relative_path = registry.get(name)
        if relative_path is None:
            missing.append(name)
        else:
            resolved.append({"name": name, "path": str(Path(techpack_dir) / relative_path)})
    return ResolvedRefs(resolved, missing)


def route_skills(
    manifest: Manifest,
    techpack_dir: Path,
    phase: str,
    component: Optional[str] = None,
) -> Dict[str, Any]:
    """Resolve the skills (and agents) a tech pack contributes to ``phase``.

    Returns ``orchestrator_skills`` always, ``agents`` when the phase declares
    any, and ``component_skills`` when ``component`` is given.
    """
    data: Dict[str, Any] = {}
    phase_entry = manifest.phases.get(phase)

    if phase_entry is None:
        data["orchestrator_skills"] = []
    else:
        skills = resolve_names(phase_entry.orchestrator_skills, manifest.skills, techpack_dir)
        if skills.missing:
            raise UnresolvedSkillReference(
                f'Phase "{phase}" references unknown skills: {", ".join(skills.missing)}',
                missing=skills.missing,
            )
        data["orchestrator_skills"] = skills.resolved

        if phase_entry.agents:
            agents = resolve_names(phase_entry.agents, manifest.agents, techpack_dir)
            if agents.missing:
                raise UnresolvedAgentReference(
                    f'Phase "{phase}" references unknown agents: {", ".join(agents.missing)}',
                    missing=agents.missing,
                )
            data["agents"] = agents.resolved

    if component is not None:
        comp = manifest.components.get(component)
        if comp is None:
            raise UnknownComponent(component)
        comp_skills = resolve_names(comp.skills, manifest.skills, techpack_dir)
        if comp_skills.missing:
            raise UnresolvedSkillReference(
                f'Component "{component}" references unknown skills: {", ".join(comp_skills.missing)}',
                missing=comp_skills.missing,
            )
        data["component_skills"] = comp_skills.resolved

    return data


def route_command(manifest: Manifest, command: str, action: str) -> Dict[str, Any]:
    """Look up the handler and action metadata for ``command``/``action``."""
    namespace = manifest.commands.get(command)
    if namespace is None:
        raise UnknownCommandNamespace(command)

    action_entry = namespace.actions.get(action)
    if action_entry is None:
        raise UnknownAction(command, action)

    data: Dict[str, Any] = {
        "handler": namespace.handler,
        "description": action_entry.description,
        "public": action_entry.public,
    }
    if namespace.skill is not None:
        data["skill"] = namespace.skill
    if action_entry.destructive is not None:
        data["destructive"] = action_entry.destructive
    if action_entry.args is not None:
        data["args"] = action_entry.args
    return data


def list_components(manifest: Manifest) -> List[Dict[str, Any]]:
    """Flat projection of every component type, in declaration order."""
    components: List[Dict[str, Any]] = []
    for name, comp in manifest.components.items():
        item: Dict[str, Any] = {
            "name": name,
            "description": comp.description,
            "singleton": comp.singleton,
            "directory_pattern": comp.directory_pattern,
            "depends_on": list(comp.depends_on),
            "skills": list(comp.skills),
            "scaffolding": comp.scaffolding,
        }
        if comp.agent is not None:
            item["agent"] = comp.agent
        components.append(item)
    return components


__all__ = [
    "ResolvedRefs",
    "resolve_names",
    "route_skills",
    "route_command",
    "list_components",
]
