from __future__ import annotations

from pathlib import Path

import pytest

from helpers.io_utils import write_text
from helpers.techpacks import write_settings
from sdd.core.config import ConfigManager
from sdd.core.exceptions import SettingsError

pytestmark = pytest.mark.fast


def test_bundled_defaults(tmp_path: Path) -> None:
    cfg = ConfigManager(repo_root=tmp_path).load_config()
    assert cfg["logging"] == {"enabled": False, "level": "INFO", "filename": "sdd-system.log"}
    assert cfg["paths"]["settings_files"][0] == "sdd/sdd-settings.yaml"


def test_settings_system_section_overrides_defaults(tmp_path: Path) -> None:
    write_settings(tmp_path, {}, system={"logging": {"level": "DEBUG"}})
    cfg = ConfigManager(repo_root=tmp_path).load_config()
    assert cfg["logging"]["level"] == "DEBUG"
    assert cfg["logging"]["filename"] == "sdd-system.log"


def test_env_overrides_win_and_are_coerced(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_settings(tmp_path, {}, system={"logging": {"level": "DEBUG"}})
    monkeypatch.setenv("SDD_LOGGING__LEVEL", "WARNING")
    monkeypatch.setenv("SDD_LOGGING__ENABLED", "true")
    monkeypatch.setenv("SDD_PATHS__SETTINGS_FILES", '["custom/settings.yaml"]')

    cfg = ConfigManager(repo_root=tmp_path).load_config()

    assert cfg["logging"]["level"] == "WARNING"
    assert cfg["logging"]["enabled"] is True
    assert cfg["paths"]["settings_files"] == ["custom/settings.yaml"]


def test_plain_prefixed_variables_are_not_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDD_PROJECT_ROOT", str(tmp_path))
    cfg = ConfigManager(repo_root=tmp_path).load_config()
    assert "project_root" not in cfg


def test_settings_path_lookup_order(tmp_path: Path) -> None:
    mgr = ConfigManager(repo_root=tmp_path)
    assert mgr.settings_path() is None

    write_text(tmp_path / "sdd-settings.yaml", "techpacks: {}\n")
    assert mgr.settings_path() == tmp_path / "sdd-settings.yaml"

    write_text(tmp_path / "sdd" / "sdd-settings.yaml", "techpacks: {}\n")
    assert mgr.settings_path() == tmp_path / "sdd" / "sdd-settings.yaml"


def test_invalid_settings_yaml(tmp_path: Path) -> None:
    write_text(tmp_path / "sdd" / "sdd-settings.yaml", "system: [unclosed\n")
    with pytest.raises(SettingsError):
        ConfigManager(repo_root=tmp_path).load_config()


def test_system_section_does_not_leak_into_bundled_defaults(tmp_path: Path) -> None:
    write_settings(tmp_path, {}, system={"logging": {"level": "DEBUG"}})
    ConfigManager(repo_root=tmp_path).load_config()

    other = tmp_path / "other"
    other.mkdir()
    assert ConfigManager(repo_root=other).load_config()["logging"]["level"] == "INFO"


def test_settings_file_that_is_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "sdd" / "sdd-settings.yaml"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"system:\n  logging: \xff\xfe\n")
    with pytest.raises(SettingsError):
        ConfigManager(repo_root=tmp_path).load_config()
