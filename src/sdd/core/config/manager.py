"""
sdd-system configuration management (YAML layering + environment overrides).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from sdd.core.exceptions import ParseError, SettingsError
from sdd.core.utils.io import read_yaml
from sdd.data import load_bundled_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "SDD_"


def _overlay(base: Dict[str, Any], top: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in top.items():
        below = merged.get(key)
        if isinstance(below, dict) and isinstance(value, dict):
            value = _overlay(below, value)
        merged[key] = value
    return merged


class ConfigManager:
    """Load and merge sdd-system configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: SDD_<section>__<key>[__<key>...]
    2. Project settings: the ``system:`` section of sdd/sdd-settings.yaml
    3. Bundled defaults: sdd.data/config/defaults.yaml

    Only variables with a ``__`` separator are treated as overrides, so plain
    switches such as ``SDD_PROJECT_ROOT`` never leak into the config tree.
    """

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = Path(repo_root)

    # ---------------------------------------------------------------------
    # Layers
    # ---------------------------------------------------------------------

    def bundled_defaults(self) -> Dict[str, Any]:
        return copy.deepcopy(load_bundled_yaml("config/defaults.yaml") or {})

    def settings_candidates(self, cfg: Optional[Dict[str, Any]] = None) -> List[Path]:
        cfg = cfg if cfg is not None else self.bundled_defaults()
        rels = (cfg.get("paths") or {}).get("settings_files") or []
        return [self.repo_root / str(rel) for rel in rels]

    def settings_path(self, cfg: Optional[Dict[str, Any]] = None) -> Optional[Path]:
        """Return the first existing settings file, or None."""
        for candidate in self.settings_candidates(cfg):
            if candidate.is_file():
                return candidate
        return None

    def load_settings(self, cfg: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Load the raw project settings document (empty when absent)."""
        path = self.settings_path(cfg)
        if path is None:
            return {}
        try:
            data = read_yaml(path)
        except ParseError as exc:
            raise SettingsError(
                f"Invalid settings file {path}: {exc}",
                context={"path": str(path)},
            ) from exc
        return data if isinstance(data, dict) else {}

    # ---------------------------------------------------------------------
    # Environment overrides
    # ---------------------------------------------------------------------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return s
        return s

    def _iter_env_overrides(self):
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if "__" not in raw:
                continue
            segs = [seg.lower() for seg in raw.split("__")]
            if any(not seg for seg in segs):
                logger.warning("Ignoring malformed override %s (empty segment)", key)
                continue
            yield segs, self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            cur = cfg
            for part in path[:-1]:
                nxt = cur.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cur[part] = nxt
                cur = nxt
            cur[path[-1]] = value

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------

    def load_config(self) -> Dict[str, Any]:
        """Return the merged configuration.

        The result is rebuilt on each call; every CLI invocation is a single
        read pass so there is nothing to cache.
        """
        cfg = self.bundled_defaults()
        system = self.load_settings(cfg).get("system")
        if isinstance(system, dict):
            cfg = _overlay(cfg, system)
        self.apply_env_overrides(cfg)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX"]
