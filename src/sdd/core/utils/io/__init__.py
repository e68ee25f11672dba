"""I/O helpers: UTF-8 text and YAML reads that fail as ``ParseError``."""
from __future__ import annotations

from .core import PathLike, ensure_directory, read_text
from .yaml import read_yaml

__all__ = ["PathLike", "ensure_directory", "read_text", "read_yaml"]
