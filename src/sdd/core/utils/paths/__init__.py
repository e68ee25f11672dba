"""Path utilities for sdd-system.

- Resolver: project root and plugin root resolution
"""
from __future__ import annotations

from .resolver import (
    LEGACY_SETTINGS_DIR,
    PLUGIN_ROOT_ENV,
    PROJECT_ROOT_ENV,
    SETTINGS_DIR,
    SETTINGS_FILENAME,
    get_plugin_root,
    resolve_project_root,
)

__all__ = [
    "LEGACY_SETTINGS_DIR",
    "PLUGIN_ROOT_ENV",
    "PROJECT_ROOT_ENV",
    "SETTINGS_DIR",
    "SETTINGS_FILENAME",
    "get_plugin_root",
    "resolve_project_root",
]
