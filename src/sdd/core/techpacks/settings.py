"""Tech pack settings entries (the ``techpacks`` map of sdd-settings.yaml).

Each installed tech pack is recorded under its namespace with an install
mode. The mode decides which location fields are meaningful, so each mode is
its own entry type; an unrecognised mode resolves like ``external``:

    techpacks:
      core:
        name: Core Pack
        namespace: core
        version: 1.0.0
        mode: internal          # path relative to the plugin root
        path: techpacks/core
      web:
        mode: external          # absolute (or process-relative) path
        path: /opt/packs/web
      infra:
        mode: git               # cloned under the project root
        repo: https://example.com/infra-pack.git
        ref: v2.0.0
        install_path: sdd/techpacks/infra
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Union

from sdd.core.exceptions import NamespaceNotFound, ParseError, SettingsError
from sdd.core.utils.io import read_yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InternalEntry:
    name: str
    namespace: str
    version: str
    path: str
    mode: Literal["internal"] = "internal"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ExternalEntry:
    name: str
    namespace: str
    version: str
    path: str
    mode: Literal["external"] = "external"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GitEntry:
    name: str
    namespace: str
    version: str
    repo: str
    install_path: str
    ref: Optional[str] = None
    mode: Literal["git"] = "git"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.ref is None:
            data.pop("ref")
        return data


TechPackSettingsEntry = Union[InternalEntry, ExternalEntry, GitEntry]


def _require_str(raw: Mapping[str, Any], key: str, namespace: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(
            f'Tech pack "{namespace}": missing or empty "{key}"',
            context={"namespace": namespace, "field": key},
        )
    return value.strip()


def parse_settings_entry(namespace: str, raw: Any) -> TechPackSettingsEntry:
    """Build the entry variant matching ``raw['mode']``.

    ``internal`` and ``git`` have their own location rules; any other mode
    (``external``, missing, or unrecognised) uses ``path`` as-is. A ``git``
    entry written without ``install_path`` is treated the same way.

    Raises:
        SettingsError: the entry is not a mapping or lacks its location field
    """
    if not isinstance(raw, Mapping):
        raise SettingsError(
            f'Tech pack "{namespace}": entry must be a mapping',
            context={"namespace": namespace},
        )

    mode = str(raw.get("mode") or "").strip()
    name = str(raw.get("name") or namespace)
    entry_ns = str(raw.get("namespace") or namespace)
    version = str(raw.get("version") or "")

    if mode == "internal":
        return InternalEntry(name, entry_ns, version, _require_str(raw, "path", namespace))

    if mode == "git":
        install_path = raw.get("install_path")
        if isinstance(install_path, str) and install_path.strip():
            ref = raw.get("ref")
            return GitEntry(
                name,
                entry_ns,
                version,
                repo=str(raw.get("repo") or ""),
                install_path=install_path.strip(),
                ref=str(ref) if ref is not None else None,
            )
        logger.debug("git entry %s has no install_path; resolving its path as-is", namespace)
    elif mode != "external":
        logger.debug("Tech pack %s has install mode %r; resolving its path as-is", namespace, mode)

    return ExternalEntry(name, entry_ns, version, _require_str(raw, "path", namespace))


def parse_techpack_section(settings: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the raw ``techpacks`` map of a settings document, in file order.

    Entries are left unparsed; :func:`lookup_settings_entry` parses only the
    one being resolved, so a malformed entry affects its own namespace alone.
    """
    raw_map = settings.get("techpacks") if isinstance(settings, Mapping) else None
    if raw_map is None:
        return {}
    if not isinstance(raw_map, Mapping):
        raise SettingsError("settings: \"techpacks\" must be a mapping of namespace to entry")
    return {str(namespace): raw for namespace, raw in raw_map.items()}


def load_techpack_section(settings_path: Path) -> Dict[str, Any]:
    """Read ``settings_path`` and return its raw ``techpacks`` map."""
    try:
        data = read_yaml(settings_path)
    except ParseError as exc:
        raise SettingsError(
            f"Invalid settings file {settings_path}: {exc}",
            context={"path": str(settings_path)},
        ) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(
            f"Settings file is not a YAML mapping: {settings_path}",
            context={"path": str(settings_path)},
        )
    return parse_techpack_section(data)


def lookup_settings_entry(techpacks: Mapping[str, Any], namespace: str) -> TechPackSettingsEntry:
    """Parse the entry recorded under ``namespace``.

    Raises:
        NamespaceNotFound: ``namespace`` has no settings entry
        SettingsError: the entry itself is malformed
    """
    if namespace not in techpacks:
        raise NamespaceNotFound(namespace)
    return parse_settings_entry(namespace, techpacks[namespace])


def describe_settings_entry(namespace: str, raw: Any) -> Dict[str, Any]:
    """Listing view of one entry; a malformed entry is shown as written."""
    try:
        return parse_settings_entry(namespace, raw).to_dict()
    except SettingsError as exc:
        logger.warning("Listing tech pack %s as written: %s", namespace, exc)
        shown: Dict[str, Any] = {"name": namespace, "namespace": namespace, "version": "", "mode": ""}
        if isinstance(raw, Mapping):
            shown.update({str(k): v for k, v in raw.items()})
        return shown


__all__ = [
    "InternalEntry",
    "ExternalEntry",
    "GitEntry",
    "TechPackSettingsEntry",
    "parse_settings_entry",
    "parse_techpack_section",
    "load_techpack_section",
    "lookup_settings_entry",
    "describe_settings_entry",
]
