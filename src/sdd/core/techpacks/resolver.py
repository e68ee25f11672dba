"""Tech pack directory resolution.

Pure function of the settings entries and the two roots; whether the
directory exists is left to the manifest loader and the validator.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Tuple

from .settings import (
    ExternalEntry,
    GitEntry,
    InternalEntry,
    TechPackSettingsEntry,
    lookup_settings_entry,
)

logger = logging.getLogger(__name__)


def entry_directory(entry: TechPackSettingsEntry, project_root: Path, plugin_root: Path) -> Path:
    """Return the absolute directory of a single settings entry."""
    if isinstance(entry, InternalEntry):
        return Path(plugin_root) / entry.path
    if isinstance(entry, GitEntry):
        return Path(project_root) / entry.install_path
    if isinstance(entry, ExternalEntry):
        return Path(entry.path).resolve()
    raise TypeError(f"Unsupported tech pack entry: {entry!r}")


def locate_techpack(
    namespace: str,
    techpacks: Mapping[str, Any],
    project_root: Path,
    plugin_root: Path,
) -> Tuple[TechPackSettingsEntry, Path]:
    """Return the parsed entry of ``namespace`` and its tech pack directory.

    ``techpacks`` is the raw settings map; only the ``namespace`` entry is
    parsed.

    Raises:
        NamespaceNotFound: ``namespace`` has no settings entry
        SettingsError: the ``namespace`` entry is malformed
    """
    entry = lookup_settings_entry(techpacks, namespace)
    directory = entry_directory(entry, project_root, plugin_root)
    logger.debug("Resolved tech pack %s (%s) to %s", namespace, entry.mode, directory)
    return entry, directory


def resolve_techpack_dir(
    namespace: str,
    techpacks: Mapping[str, Any],
    project_root: Path,
    plugin_root: Path,
) -> Path:
    """Resolve ``namespace`` to its tech pack directory (see :func:`locate_techpack`)."""
    return locate_techpack(namespace, techpacks, project_root, plugin_root)[1]


__all__ = ["entry_directory", "locate_techpack", "resolve_techpack_dir"]
