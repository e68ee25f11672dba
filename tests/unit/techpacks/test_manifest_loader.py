from __future__ import annotations

from pathlib import Path

import pytest

from helpers.io_utils import write_text
from sdd.core.exceptions import ManifestNotFound, ParseError
from sdd.core.techpacks import load_manifest, manifest_from_document

pytestmark = pytest.mark.fast


def test_load_sample_manifest(techpack_dir: Path) -> None:
    manifest = load_manifest(techpack_dir)

    assert manifest.name == "Web Pack"
    assert manifest.namespace == "web"
    assert manifest.techpack.system_path == "system/README.md"
    assert list(manifest.components) == ["api", "db"]
    assert manifest.components["api"].depends_on == ["db"]
    assert manifest.components["api"].agent == "backend-dev"
    assert manifest.components["db"].singleton is True
    assert manifest.phases["plan"].agents == ["backend-dev"]
    assert manifest.help.capabilities == "help-caps"

    migrate = manifest.commands["db"].actions["migrate"]
    assert migrate.public is True
    assert migrate.destructive is True
    assert migrate.args is not None and "target" in migrate.args
    assert manifest.commands["db"].actions["status"].destructive is None


def test_optional_sections_default_to_empty() -> None:
    manifest = manifest_from_document(
        {
            "techpack": {"name": "Tiny", "namespace": "tiny", "description": "", "version": "0.1.0"},
            "skills": {},
            "components": {"app": {"description": "App"}},
        }
    )
    assert manifest.agents == {}
    assert manifest.phases == {}
    assert manifest.commands == {}
    assert manifest.components["app"].depends_on == []
    assert manifest.components["app"].skills == []
    assert manifest.components["app"].singleton is False
    assert manifest.components["app"].agent is None


def test_loader_does_not_validate(tmp_path: Path) -> None:
    # Dangling references and a bad version still load; validation is separate.
    write_text(
        tmp_path / "techpack.yaml",
        "techpack: {name: X, namespace: x, version: nope}\n"
        "skills: {}\n"
        "components: {a: {scaffolding: missing, depends_on: [ghost]}}\n",
    )
    manifest = load_manifest(tmp_path)
    assert manifest.components["a"].scaffolding == "missing"


def test_missing_manifest(tmp_path: Path) -> None:
    with pytest.raises(ManifestNotFound, match="techpack.yaml not found"):
        load_manifest(tmp_path)


def test_invalid_yaml(tmp_path: Path) -> None:
    write_text(tmp_path / "techpack.yaml", "techpack: {name: [unclosed\n")
    with pytest.raises(ParseError, match="Invalid YAML"):
        load_manifest(tmp_path)


def test_non_mapping_root(tmp_path: Path) -> None:
    write_text(tmp_path / "techpack.yaml", "- just\n- a list\n")
    with pytest.raises(ParseError, match="must be a YAML mapping"):
        load_manifest(tmp_path)


def test_manifest_that_is_not_utf8(tmp_path: Path) -> None:
    (tmp_path / "techpack.yaml").write_bytes(b"techpack:\n  name: \xff\xfe bad\n")
    with pytest.raises(ParseError, match="not valid UTF-8") as exc_info:
        load_manifest(tmp_path)
    assert exc_info.value.context == {"path": str(tmp_path / "techpack.yaml")}
