"""File reads and directory creation for the loaders and the log handler."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from sdd.core.exceptions import ParseError

PathLike = Union[str, Path]


def ensure_directory(path: PathLike) -> Path:
    """Create ``path`` (and parents) if missing and return it."""
    path = Path(path)
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(f"Path exists but is not a directory: {path}")
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text(path: PathLike) -> str:
    """Return the UTF-8 contents of ``path``.

    Callers check existence first, so any failure here (unreadable file,
    bytes that are not UTF-8) is reported as a ``ParseError`` on that path.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8: {exc}", context={"path": str(path)}) from exc
    except OSError as exc:
        raise ParseError(f"Cannot read {path}: {exc}", context={"path": str(path)}) from exc


__all__ = ["PathLike", "ensure_directory", "read_text"]
