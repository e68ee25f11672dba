"""Centralized root resolution for sdd-system.

Two roots matter to every command:

- the *project root*: the directory owning ``sdd/sdd-settings.yaml`` (or a
  ``package.json``), found by walking up from the working directory;
- the *plugin root*: where the sdd-system distribution keeps internal tech
  packs, overridable with ``CLAUDE_PLUGIN_ROOT``.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from sdd.core.exceptions import ProjectNotFoundError

logger = logging.getLogger(__name__)

PROJECT_ROOT_ENV = "SDD_PROJECT_ROOT"
PLUGIN_ROOT_ENV = "CLAUDE_PLUGIN_ROOT"

SETTINGS_FILENAME = "sdd-settings.yaml"
SETTINGS_DIR = "sdd"
LEGACY_SETTINGS_DIR = ".sdd"


def _marker_kind(directory: Path) -> Optional[str]:
    """Return which project marker ``directory`` carries, if any."""
    if (directory / "package.json").exists() or (directory / SETTINGS_DIR / SETTINGS_FILENAME).exists():
        return "current"
    if (directory / LEGACY_SETTINGS_DIR / SETTINGS_FILENAME).exists():
        return "legacy-dir"
    if (directory / SETTINGS_FILENAME).exists():
        return "legacy-root"
    return None


def resolve_project_root(start: Optional[Path] = None) -> Path:
    """Resolve the project root.

    Resolution priority:
    1. ``SDD_PROJECT_ROOT`` environment variable
    2. Upward walk from ``start`` (default: CWD) for ``package.json`` or
       ``sdd/sdd-settings.yaml``; the deprecated ``.sdd/`` directory and a
       root-level ``sdd-settings.yaml`` are still honoured with a warning.

    Raises:
        ProjectNotFoundError: If no marker is found before the filesystem root
    """
    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.is_dir():
            raise ProjectNotFoundError(
                f"{PROJECT_ROOT_ENV} points at missing directory: {env_path}",
                context={"path": str(env_path)},
            )
        return env_path

    current = Path(start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        # The filesystem root itself is never treated as a project.
        if directory.parent == directory:
            break
        kind = _marker_kind(directory)
        if kind == "current":
            return directory
        if kind == "legacy-dir":
            logger.warning(
                "Deprecated settings location %s/; rename it to %s/",
                directory / LEGACY_SETTINGS_DIR,
                SETTINGS_DIR,
            )
            return directory
        if kind == "legacy-root":
            logger.warning(
                "Deprecated settings location %s; move it to %s/%s",
                directory / SETTINGS_FILENAME,
                SETTINGS_DIR,
                SETTINGS_FILENAME,
            )
            return directory

    raise ProjectNotFoundError(
        "Not in an SDD project (no sdd/ or package.json found)",
        context={"start": str(current)},
    )


def get_plugin_root() -> Path:
    """Return the plugin root that ``internal`` tech pack paths are relative to.

    ``CLAUDE_PLUGIN_ROOT`` wins; otherwise the bundled ``sdd.data`` directory
    is used, which is where internal tech packs ship.
    """
    env_root = os.environ.get(PLUGIN_ROOT_ENV)
    if env_root:
        return Path(env_root).expanduser()

    from sdd.data import data_root

    return data_root()


__all__ = [
    "PROJECT_ROOT_ENV",
    "PLUGIN_ROOT_ENV",
    "SETTINGS_FILENAME",
    "SETTINGS_DIR",
    "LEGACY_SETTINGS_DIR",
    "resolve_project_root",
    "get_plugin_root",
]
