"""Strict YAML reads."""
from __future__ import annotations

from typing import Any

import yaml

from sdd.core.exceptions import ParseError

from .core import PathLike, read_text


def read_yaml(path: PathLike) -> Any:
    """Parse the YAML document at ``path`` (``None`` for an empty file).

    Raises:
        ParseError: the file cannot be read, is not UTF-8, or is not valid YAML
    """
    text = read_text(path)
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc


__all__ = ["read_yaml"]
