from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Mapping

from sdd.core.utils.io import ensure_directory

_CONFIGURED_LOG_PATH: str | None = None
_SDD_FILE_HANDLER: logging.Handler | None = None
_JSON_MODE_NULL_HANDLER_INSTALLED: bool = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, log_path: Path, level: str = "INFO") -> None:
    """Configure Python stdlib logging to write to `log_path` (no stderr handler).

    Idempotent per-process: if already configured for the same file, no-op.
    """
    global _CONFIGURED_LOG_PATH, _SDD_FILE_HANDLER

    resolved = str(Path(log_path).resolve())
    if _CONFIGURED_LOG_PATH == resolved and _SDD_FILE_HANDLER is not None:
        return

    ensure_directory(Path(resolved).parent)

    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    # FileHandler is also a StreamHandler: only drop the stdout/stderr ones.
    for h in list(root.handlers):
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) in (sys.stdout, sys.stderr):
            root.removeHandler(h)
            h.close()

    if _SDD_FILE_HANDLER is not None:
        root.removeHandler(_SDD_FILE_HANDLER)
        _SDD_FILE_HANDLER.close()
        _SDD_FILE_HANDLER = None

    fh = logging.FileHandler(resolved, encoding="utf-8")
    fh.setLevel(_level_from_name(level))
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

    _SDD_FILE_HANDLER = fh
    _CONFIGURED_LOG_PATH = resolved


def configure_from_config(cfg: Mapping[str, Any], repo_root: Path) -> bool:
    """Install the file handler when ``logging.enabled`` is set.

    Returns True when logging was configured.
    """
    log_cfg = cfg.get("logging") or {}
    if not log_cfg.get("enabled"):
        return False
    log_dir = (cfg.get("paths") or {}).get("log_dir") or "sdd/logs"
    filename = log_cfg.get("filename") or "sdd-system.log"
    configure_stdlib_logging(
        log_path=Path(repo_root) / str(log_dir) / str(filename),
        level=str(log_cfg.get("level") or "INFO"),
    )
    return True


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: clear configured handlers."""
    global _CONFIGURED_LOG_PATH, _SDD_FILE_HANDLER
    root = logging.getLogger()
    if _SDD_FILE_HANDLER is not None:
        root.removeHandler(_SDD_FILE_HANDLER)
        _SDD_FILE_HANDLER.close()
    _CONFIGURED_LOG_PATH = None
    _SDD_FILE_HANDLER = None


def suppress_lastresort_in_json_mode() -> None:
    """Prevent stdlib logging's lastResort handler from polluting JSON output.

    With no handlers configured, WARNING+ records reach stderr through the
    implicit ``lastResort`` handler. A NullHandler on the root logger keeps
    ``--json`` output machine-readable without disabling logging levels.
    """
    global _JSON_MODE_NULL_HANDLER_INSTALLED

    root = logging.getLogger()
    if root.handlers or _JSON_MODE_NULL_HANDLER_INSTALLED:
        return
    root.addHandler(logging.NullHandler())
    _JSON_MODE_NULL_HANDLER_INSTALLED = True


__all__ = [
    "configure_stdlib_logging",
    "configure_from_config",
    "reset_stdlib_logging_for_tests",
    "suppress_lastresort_in_json_mode",
]
