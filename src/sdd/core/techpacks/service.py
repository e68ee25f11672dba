from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from sdd.core.config import ConfigManager
from sdd.core.exceptions import SettingsError
from sdd.core.utils.paths import get_plugin_root

from . import content, routing
from .manifest import Manifest, load_manifest
from .ordering import dependency_order, depends_on_map
from .resolver import locate_techpack, resolve_techpack_dir
from .settings import (
    TechPackSettingsEntry,
    describe_settings_entry,
    load_techpack_section,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedTechPack:
    entry: TechPackSettingsEntry
    directory: Path
    manifest: Manifest


class TechPackService:
    """Namespace-based tech pack queries for one project.

    Nothing is cached: each call re-reads the settings file and the manifest,
    matching the single-pass lifetime of a CLI invocation.
    """

    def __init__(self, *, project_root: Path, plugin_root: Optional[Path] = None) -> None:
        self.project_root = Path(project_root).expanduser().resolve()
        self.plugin_root = Path(plugin_root or get_plugin_root()).expanduser().resolve()
        self.cfg = ConfigManager(repo_root=self.project_root)

    # ---------------------------------------------------------------------
    # Resolution
    # ---------------------------------------------------------------------

    def techpacks(self) -> Dict[str, Any]:
        """Raw ``techpacks`` settings map; entries are parsed on lookup."""
        settings_path = self.cfg.settings_path()
        if settings_path is None:
            raise SettingsError(
                "sdd-settings.yaml not found",
                context={"project_root": str(self.project_root)},
            )
        return load_techpack_section(settings_path)

    def resolve_dir(self, namespace: str) -> Path:
        return resolve_techpack_dir(namespace, self.techpacks(), self.project_root, self.plugin_root)

    def load(self, namespace: str) -> LoadedTechPack:
        entry, directory = locate_techpack(namespace, self.techpacks(), self.project_root, self.plugin_root)
        return LoadedTechPack(entry, directory, load_manifest(directory))

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------

    def list_techpacks(self) -> List[Dict[str, Any]]:
        return [describe_settings_entry(ns, raw) for ns, raw in self.techpacks().items()]

    def info(self, namespace: str) -> Dict[str, Any]:
        pack = self.load(namespace)
        m = pack.manifest
        return {
            "name": m.techpack.name,
            "namespace": m.techpack.namespace,
            "version": m.techpack.version,
            "description": m.techpack.description,
            "min_core_version": m.techpack.min_core_version,
            "system_path": m.techpack.system_path,
            "component_types": list(m.components),
            "commands": list(m.commands),
            "phases": list(m.phases),
            "skills": len(m.skills),
            "agents": len(m.agents),
            "mode": pack.entry.mode,
            "path": str(pack.directory),
        }

    def resolve_path(self, namespace: str, relative_path: str) -> str:
        """Join ``relative_path`` under the tech pack directory.

        A leading ``/`` is dropped and the result is normalized, as a plain
        path join would: ``/etc/x`` lands under the pack and ``a/../b`` is
        ``<pack>/b``.
        """
        joined = os.path.join(str(self.resolve_dir(namespace)), relative_path.lstrip("/" + os.sep))
        return os.path.normpath(joined)

    def list_components(self, namespace: str) -> List[Dict[str, Any]]:
        return routing.list_components(self.load(namespace).manifest)

    def dependency_order(self, namespace: str) -> List[str]:
        return dependency_order(depends_on_map(self.load(namespace).manifest.components))

    def route_skills(self, namespace: str, phase: str, component: Optional[str] = None) -> Dict[str, Any]:
        pack = self.load(namespace)
        return routing.route_skills(pack.manifest, pack.directory, phase, component)

    def route_command(self, namespace: str, command: str, action: str) -> Dict[str, Any]:
        return routing.route_command(self.load(namespace).manifest, command, action)

    def load_skill(self, namespace: str, skill_name: str) -> Dict[str, Any]:
        pack = self.load(namespace)
        return content.load_skill(pack.manifest, pack.directory, skill_name)

    def load_agent(self, namespace: str, agent_name: str) -> Dict[str, Any]:
        pack = self.load(namespace)
        return content.load_agent(pack.manifest, pack.directory, agent_name)


__all__ = ["LoadedTechPack", "TechPackService"]
