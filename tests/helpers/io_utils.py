"""I/O utilities for writing test files.

All functions create parent directories automatically if they don't exist.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def write_text(path: Path, content: str) -> Path:
    """Write text to ``path``, creating parent directories if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_yaml(path: Path, data: Any, *, sort_keys: bool = False) -> Path:
    """Write data to a YAML file, creating parent directories if needed.

    Key order is preserved by default: manifests and settings maps are
    order-sensitive (declaration order shows up in results).
    """
    content = yaml.safe_dump(data, default_flow_style=False, sort_keys=sort_keys, allow_unicode=True)
    return write_text(path, content)
