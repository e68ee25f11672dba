from __future__ import annotations

import logging
from pathlib import Path

import pytest

from helpers.io_utils import write_text
from sdd.core.exceptions import ProjectNotFoundError
from sdd.core.utils.paths import get_plugin_root, resolve_project_root
from sdd.data import data_root

pytestmark = pytest.mark.fast


def test_walks_up_to_settings_directory(tmp_path: Path) -> None:
    write_text(tmp_path / "repo" / "sdd" / "sdd-settings.yaml", "techpacks: {}\n")
    nested = tmp_path / "repo" / "components" / "api"
    nested.mkdir(parents=True)

    assert resolve_project_root(nested) == (tmp_path / "repo").resolve()


def test_package_json_marks_project(tmp_path: Path) -> None:
    write_text(tmp_path / "repo" / "package.json", "{}")
    assert resolve_project_root(tmp_path / "repo") == (tmp_path / "repo").resolve()


def test_legacy_directory_logs_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_text(tmp_path / "repo" / ".sdd" / "sdd-settings.yaml", "techpacks: {}\n")

    with caplog.at_level(logging.WARNING, logger="sdd.core.utils.paths.resolver"):
        root = resolve_project_root(tmp_path / "repo")

    assert root == (tmp_path / "repo").resolve()
    assert "Deprecated settings location" in caplog.text


def test_env_var_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_text(tmp_path / "a" / "package.json", "{}")
    (tmp_path / "b").mkdir()
    monkeypatch.setenv("SDD_PROJECT_ROOT", str(tmp_path / "b"))

    assert resolve_project_root(tmp_path / "a") == (tmp_path / "b").resolve()


def test_env_var_must_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDD_PROJECT_ROOT", str(tmp_path / "missing"))
    with pytest.raises(ProjectNotFoundError):
        resolve_project_root(tmp_path)


def test_plugin_root_env_and_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_plugin_root() == data_root()

    monkeypatch.setenv("CLAUDE_PLUGIN_ROOT", str(tmp_path))
    assert get_plugin_root() == tmp_path
