from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'sdd' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from helpers.techpacks import external_entry, make_techpack, write_settings  # noqa: E402
from sdd.core.stdlib_logging import reset_stdlib_logging_for_tests  # noqa: E402

_LEAK_PRONE_ENV_KEYS = ["SDD_PROJECT_ROOT", "CLAUDE_PLUGIN_ROOT"]


@pytest.fixture(autouse=True)
def _isolate_sdd_env(monkeypatch: pytest.MonkeyPatch):
    """Drop project/plugin root overrides and SDD_* config overrides from the host env."""
    for key in _LEAK_PRONE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    for key in list(os.environ):
        if key.startswith("SDD_") and "__" in key:
            monkeypatch.delenv(key, raising=False)
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def techpack_dir(tmp_path: Path) -> Path:
    """The sample web tech pack, fully populated."""
    return make_techpack(tmp_path / "packs" / "web")


@pytest.fixture
def project(tmp_path: Path, techpack_dir: Path) -> Path:
    """A project whose settings install the sample pack under namespace ``web``."""
    root = tmp_path / "project"
    write_settings(root, {"web": external_entry(techpack_dir)})
    return root
