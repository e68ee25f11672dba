"""Tech pack manifest (``techpack.yaml``) loading.

The loader only parses; it never validates. Missing optional sections default
to empty maps/lists so routing code can index them directly. Structural
problems are the validator's business (see ``validation.py``).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from sdd.core.exceptions import ManifestNotFound, ParseError
from sdd.core.utils.io import read_yaml

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "techpack.yaml"


@dataclass(frozen=True)
class TechPackIdentity:
    name: str
    namespace: str
    description: str = ""
    version: str = ""
    min_core_version: str = ""
    system_path: str = ""


@dataclass(frozen=True)
class ComponentType:
    description: str = ""
    directory_pattern: str = ""
    depends_on: List[str] = field(default_factory=list)
    scaffolding: str = ""
    skills: List[str] = field(default_factory=list)
    agent: Optional[str] = None
    singleton: bool = False


@dataclass(frozen=True)
class Phase:
    orchestrator_skills: List[str] = field(default_factory=list)
    agents: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class HelpSection:
    capabilities: str = ""
    content: str = ""


@dataclass(frozen=True)
class CommandAction:
    description: str = ""
    public: bool = False
    destructive: Optional[bool] = None
    args: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class CommandNamespace:
    handler: str = ""
    skill: Optional[str] = None
    actions: Dict[str, CommandAction] = field(default_factory=dict)


@dataclass(frozen=True)
class Manifest:
    """Typed view of a tech pack manifest.

    ``skills`` and ``agents`` are flat name -> relative path registries; every
    other section refers to skills and agents by registry name.
    """

    techpack: TechPackIdentity
    skills: Dict[str, str] = field(default_factory=dict)
    agents: Dict[str, str] = field(default_factory=dict)
    components: Dict[str, ComponentType] = field(default_factory=dict)
    phases: Dict[str, Phase] = field(default_factory=dict)
    help: HelpSection = field(default_factory=HelpSection)
    commands: Dict[str, CommandNamespace] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.techpack.name

    @property
    def namespace(self) -> str:
        return self.techpack.namespace


# ---------------------------------------------------------------------------
# Lenient field readers: wrong types collapse to the empty default.
# ---------------------------------------------------------------------------


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _str_map(value: Any) -> Dict[str, str]:
    return {str(k): _str(v) for k, v in _mapping(value).items()}


def _component(raw: Any) -> ComponentType:
    data = _mapping(raw)
    return ComponentType(
        description=_str(data.get("description")),
        directory_pattern=_str(data.get("directory_pattern")),
        depends_on=_str_list(data.get("depends_on")),
        scaffolding=_str(data.get("scaffolding")),
        skills=_str_list(data.get("skills")),
        agent=_opt_str(data.get("agent")),
        singleton=bool(data.get("singleton", False)),
    )


def _phase(raw: Any) -> Phase:
    data = _mapping(raw)
    return Phase(
        orchestrator_skills=_str_list(data.get("orchestrator_skills")),
        agents=_str_list(data.get("agents")),
    )


def _action(raw: Any) -> CommandAction:
    data = _mapping(raw)
    destructive = data.get("destructive")
    args = data.get("args")
    return CommandAction(
        description=_str(data.get("description")),
        public=bool(data.get("public", False)),
        destructive=bool(destructive) if destructive is not None else None,
        args=dict(args) if isinstance(args, Mapping) else None,
    )


def _command(raw: Any) -> CommandNamespace:
    data = _mapping(raw)
    return CommandNamespace(
        handler=_str(data.get("handler")),
        skill=_opt_str(data.get("skill")),
        actions={str(k): _action(v) for k, v in _mapping(data.get("actions")).items()},
    )


def manifest_from_document(doc: Mapping[str, Any]) -> Manifest:
    """Build a :class:`Manifest` from an already-parsed document."""
    ident = _mapping(doc.get("techpack"))
    help_raw = _mapping(doc.get("help"))
    return Manifest(
        techpack=TechPackIdentity(
            name=_str(ident.get("name")),
            namespace=_str(ident.get("namespace")),
            description=_str(ident.get("description")),
            version=_str(ident.get("version")),
            min_core_version=_str(ident.get("min_core_version")),
            system_path=_str(ident.get("system_path")),
        ),
        skills=_str_map(doc.get("skills")),
        agents=_str_map(doc.get("agents")),
        components={str(k): _component(v) for k, v in _mapping(doc.get("components")).items()},
        phases={str(k): _phase(v) for k, v in _mapping(doc.get("phases")).items()},
        help=HelpSection(
            capabilities=_str(help_raw.get("capabilities")),
            content=_str(help_raw.get("content")),
        ),
        commands={str(k): _command(v) for k, v in _mapping(doc.get("commands")).items()},
    )


def manifest_path(techpack_dir: Path) -> Path:
    return Path(techpack_dir) / MANIFEST_FILENAME


def read_manifest_document(techpack_dir: Path) -> Dict[str, Any]:
    """Read ``<techpack_dir>/techpack.yaml`` as a raw mapping.

    Raises:
        ManifestNotFound: the manifest file does not exist
        ParseError: the file is not UTF-8, not valid YAML, or its root is not a mapping
    """
    path = manifest_path(techpack_dir)
    if not path.is_file():
        raise ManifestNotFound(
            f"{MANIFEST_FILENAME} not found at {path}",
            context={"path": str(path)},
        )

    data = read_yaml(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(
            f"{MANIFEST_FILENAME} must be a YAML mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    logger.debug("Read manifest %s", path)
    return data


def load_manifest(techpack_dir: Path) -> Manifest:
    """Read and parse the manifest of ``techpack_dir`` (no validation)."""
    return manifest_from_document(read_manifest_document(techpack_dir))


__all__ = [
    "MANIFEST_FILENAME",
    "TechPackIdentity",
    "ComponentType",
    "Phase",
    "HelpSection",
    "CommandAction",
    "CommandNamespace",
    "Manifest",
    "manifest_from_document",
    "manifest_path",
    "read_manifest_document",
    "load_manifest",
]
