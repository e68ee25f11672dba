"""Files shipped inside the package: ``config/defaults.yaml`` and the
``schemas/techpack.schema.yaml`` manifest schema."""
from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def data_root() -> Path:
    """Directory of the bundled data files (also the fallback plugin root)."""
    return Path(str(resources.files(__name__)))


@lru_cache(maxsize=None)
def load_bundled_yaml(relative_path: str) -> Any:
    return yaml.safe_load((data_root() / relative_path).read_text(encoding="utf-8"))


__all__ = ["data_root", "load_bundled_yaml"]
