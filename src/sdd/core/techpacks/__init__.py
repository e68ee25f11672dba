"""Tech pack manifest resolution, validation, ordering and routing.

Responsibilities:
- Resolve a namespace to its directory from the ``techpacks`` settings map
  (internal / external / git install modes).
- Load ``techpack.yaml`` into a typed :class:`Manifest` (no validation).
- Validate a manifest: schema, declared paths, registry references and the
  component dependency DAG, reporting every issue in one pass.
- Order component types deterministically (Kahn's algorithm).
- Route phases/components to skills and agents, and commands to handlers.
- Load skill content and agent metadata.
"""
from __future__ import annotations

from .content import TECHPACK_ROOT_PLACEHOLDER, load_agent, load_skill, substitute_techpack_root
from .manifest import (
    MANIFEST_FILENAME,
    CommandAction,
    CommandNamespace,
    ComponentType,
    HelpSection,
    Manifest,
    Phase,
    TechPackIdentity,
    load_manifest,
    manifest_from_document,
    read_manifest_document,
)
from .ordering import (
    DependencyGraph,
    GraphNode,
    build_dependency_graph,
    dependency_order,
    depends_on_map,
    kahn_order,
)
from .resolver import entry_directory, locate_techpack, resolve_techpack_dir
from .routing import list_components, route_command, route_skills
from .service import LoadedTechPack, TechPackService
from .settings import (
    ExternalEntry,
    GitEntry,
    InternalEntry,
    TechPackSettingsEntry,
    describe_settings_entry,
    load_techpack_section,
    lookup_settings_entry,
    parse_settings_entry,
    parse_techpack_section,
)
from .validation import (
    ValidationIssue,
    ValidationResult,
    validate_document,
    validate_techpack,
)

__all__ = [
    # Settings + resolution
    "InternalEntry",
    "ExternalEntry",
    "GitEntry",
    "TechPackSettingsEntry",
    "parse_settings_entry",
    "parse_techpack_section",
    "load_techpack_section",
    "lookup_settings_entry",
    "describe_settings_entry",
    "entry_directory",
    "locate_techpack",
    "resolve_techpack_dir",
    # Manifest
    "MANIFEST_FILENAME",
    "TechPackIdentity",
    "ComponentType",
    "Phase",
    "HelpSection",
    "CommandAction",
    "CommandNamespace",
    "Manifest",
    "manifest_from_document",
    "read_manifest_document",
    "load_manifest",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "validate_document",
    "validate_techpack",
    # Ordering
    "GraphNode",
    "DependencyGraph",
    "build_dependency_graph",
    "kahn_order",
    "depends_on_map",
    "dependency_order",
    # Routing + content
    "route_skills",
    "route_command",
    "list_components",
    "TECHPACK_ROOT_PLACEHOLDER",
    "substitute_techpack_root",
    "load_skill",
    "load_agent",
    # Service
    "LoadedTechPack",
    "TechPackService",
]
