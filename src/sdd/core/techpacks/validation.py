"""Tech pack validation.

Four independent passes over the raw manifest document, all of which run
even when an earlier one fails, so one call reports every problem:

1. schema      JSON Schema (Draft 2020-12) conformance
2. paths       every declared relative path exists under the tech pack dir
3. references  every skill/agent name used resolves in its registry
4. dag         depends_on targets exist and the graph is acyclic

The passes read the raw document (not the typed Manifest) so that a
partially-invalid manifest is still inspected as far as possible.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from sdd.data import load_bundled_yaml

from .manifest import read_manifest_document
from .ordering import build_dependency_graph, kahn_order

logger = logging.getLogger(__name__)

SCHEMA_FILENAME = "techpack.schema.yaml"


@dataclass
class ValidationIssue:
    path: str
    code: str
    message: str
    severity: str = "error"

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    ok: bool
    issues: List[ValidationIssue]
    name: str = "unknown"
    namespace: str = "unknown"
    techpack_dir: Optional[Path] = None
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def errors(self) -> List[str]:
        return [str(issue) for issue in self.issues if issue.severity == "error"]

    def format_report(self) -> str:
        """Render every issue under a tech pack header for display."""
        if self.ok:
            return (
                f'Tech pack "{self.name}" ({self.namespace}) is valid: '
                f"{self.summary.get('component_types', 0)} component types, "
                f"{self.summary.get('commands', 0)} commands"
            )
        lines = [f'Validation failed for tech pack "{self.name}" ({self.namespace}):']
        lines.extend(f"  - {err}" for err in self.errors)
        return "\n".join(lines)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def load_techpack_schema() -> Dict[str, Any]:
    """Load the bundled manifest schema (JSON Schema expressed as YAML)."""
    return load_bundled_yaml(f"schemas/{SCHEMA_FILENAME}")


# ---------------------------------------------------------------------------
# Pass 1: schema
# ---------------------------------------------------------------------------


def check_schema(doc: Mapping[str, Any], schema: Optional[Dict[str, Any]] = None) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    try:
        schema = schema if schema is not None else load_techpack_schema()
        Draft202012Validator.check_schema(schema)
    except (OSError, yaml.YAMLError, SchemaError) as exc:
        return [ValidationIssue("<schema>", "schema-load", f"Schema load/validate failed: {exc}")]

    validator = Draft202012Validator(schema)
    errors = sorted(
        validator.iter_errors(doc),
        key=lambda e: ([str(p) for p in e.absolute_path], e.message),
    )
    for err in errors:
        path = "/".join(str(p) for p in err.absolute_path) or "<root>"
        issues.append(ValidationIssue(path, "schema", err.message))
    return issues


# ---------------------------------------------------------------------------
# Pass 2: path existence
# ---------------------------------------------------------------------------


def normalize_relative_path(relative_path: str) -> str:
    """Strip a single leading ``./``; nothing else is normalized."""
    return relative_path[2:] if relative_path.startswith("./") else relative_path


def iter_declared_paths(doc: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
    """Yield ``(field, relative_path)`` for every file the manifest declares."""
    system_path = _mapping(doc.get("techpack")).get("system_path")
    if isinstance(system_path, str) and system_path:
        yield "techpack.system_path", system_path
    for registry in ("skills", "agents"):
        for name, rel in _mapping(doc.get(registry)).items():
            if isinstance(rel, str) and rel:
                yield f"{registry}.{name}", rel


def check_paths(techpack_dir: Path, doc: Mapping[str, Any]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for field_name, rel in iter_declared_paths(doc):
        clean = normalize_relative_path(rel)
        if not (Path(techpack_dir) / clean).is_file():
            issues.append(
                ValidationIssue(field_name, "path-missing", f"path does not exist: {clean}")
            )
    return issues


# ---------------------------------------------------------------------------
# Pass 3: registry cross-references
# ---------------------------------------------------------------------------


def iter_skill_references(doc: Mapping[str, Any]) -> Iterator[Tuple[str, Any]]:
    """Yield ``(field, name)`` for every place a skill is referenced by name."""
    for comp_name, comp in _mapping(doc.get("components")).items():
        comp = _mapping(comp)
        if "scaffolding" in comp:
            yield f"components.{comp_name}.scaffolding", comp.get("scaffolding")
        for i, skill in enumerate(_list(comp.get("skills"))):
            yield f"components.{comp_name}.skills[{i}]", skill
    for phase_name, phase in _mapping(doc.get("phases")).items():
        for i, skill in enumerate(_list(_mapping(phase).get("orchestrator_skills"))):
            yield f"phases.{phase_name}.orchestrator_skills[{i}]", skill
    help_section = _mapping(doc.get("help"))
    for key in ("capabilities", "content"):
        if key in help_section:
            yield f"help.{key}", help_section.get(key)
    for cmd_name, cmd in _mapping(doc.get("commands")).items():
        cmd = _mapping(cmd)
        if "skill" in cmd:
            yield f"commands.{cmd_name}.skill", cmd.get("skill")


def iter_agent_references(doc: Mapping[str, Any]) -> Iterator[Tuple[str, Any]]:
    """Yield ``(field, name)`` for every place an agent is referenced by name."""
    for comp_name, comp in _mapping(doc.get("components")).items():
        comp = _mapping(comp)
        if "agent" in comp:
            yield f"components.{comp_name}.agent", comp.get("agent")
    for phase_name, phase in _mapping(doc.get("phases")).items():
        for i, agent in enumerate(_list(_mapping(phase).get("agents"))):
            yield f"phases.{phase_name}.agents[{i}]", agent


def check_references(doc: Mapping[str, Any]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    skills = set(_mapping(doc.get("skills")).keys())
    agents = set(_mapping(doc.get("agents")).keys())

    for field_name, name in iter_skill_references(doc):
        # Non-string names are a schema problem, reported by pass 1.
        if isinstance(name, str) and name not in skills:
            issues.append(
                ValidationIssue(field_name, "unresolved-skill", f'"{name}" not in skills registry')
            )
    for field_name, name in iter_agent_references(doc):
        if isinstance(name, str) and name not in agents:
            issues.append(
                ValidationIssue(field_name, "unresolved-agent", f'"{name}" not in agents registry')
            )
    return issues


# ---------------------------------------------------------------------------
# Pass 4: dependency DAG
# ---------------------------------------------------------------------------


def check_dependency_dag(doc: Mapping[str, Any]) -> List[ValidationIssue]:
    components = _mapping(doc.get("components"))
    depends_on = {
        str(name): [dep for dep in _list(_mapping(comp).get("depends_on")) if isinstance(dep, str)]
        for name, comp in components.items()
    }
    graph = build_dependency_graph(depends_on)

    issues = [
        ValidationIssue(
            f"components.{component}.depends_on",
            "unknown-dependency",
            f'references unknown component type "{dependency}"',
        )
        for component, dependency in graph.unknown
    ]
    result = kahn_order(graph)
    if result.remaining:
        issues.append(
            ValidationIssue(
                "components",
                "dependency-cycle",
                f"dependency graph contains a cycle involving: {', '.join(result.remaining)}",
            )
        )
    return issues


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def validate_document(
    techpack_dir: Path,
    doc: Mapping[str, Any],
    *,
    schema: Optional[Dict[str, Any]] = None,
) -> ValidationResult:
    """Run all four passes over an already-read manifest document."""
    techpack_dir = Path(techpack_dir)
    issues: List[ValidationIssue] = []
    issues.extend(check_schema(doc, schema))
    issues.extend(check_paths(techpack_dir, doc))
    issues.extend(check_references(doc))
    issues.extend(check_dependency_dag(doc))

    ident = _mapping(doc.get("techpack"))
    name = str(ident.get("name") or "unknown")
    namespace = str(ident.get("namespace") or "unknown")
    ok = not any(issue.severity == "error" for issue in issues)
    logger.debug("Validated %s (%s): %d issue(s)", name, namespace, len(issues))

    return ValidationResult(
        ok=ok,
        issues=issues,
        name=name,
        namespace=namespace,
        techpack_dir=techpack_dir,
        summary={
            "name": name,
            "namespace": namespace,
            "version": ident.get("version"),
            "component_types": len(_mapping(doc.get("components"))),
            "commands": len(_mapping(doc.get("commands"))),
        },
    )


def validate_techpack(techpack_path: Path, *, schema: Optional[Dict[str, Any]] = None) -> ValidationResult:
    """Validate the tech pack at ``techpack_path`` (pre-install).

    Raises:
        ManifestNotFound: no techpack.yaml in the directory
        ParseError: the manifest is not a YAML mapping
    """
    techpack_dir = Path(techpack_path).resolve()
    doc = read_manifest_document(techpack_dir)
    return validate_document(techpack_dir, doc, schema=schema)


__all__ = [
    "SCHEMA_FILENAME",
    "ValidationIssue",
    "ValidationResult",
    "load_techpack_schema",
    "check_schema",
    "normalize_relative_path",
    "iter_declared_paths",
    "check_paths",
    "iter_skill_references",
    "iter_agent_references",
    "check_references",
    "check_dependency_dag",
    "validate_document",
    "validate_techpack",
]
