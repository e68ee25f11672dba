from __future__ import annotations

from pathlib import Path

import pytest

from helpers.io_utils import write_text
from sdd.core.exceptions import ParseError
from sdd.core.utils.io import ensure_directory, read_text, read_yaml

pytestmark = pytest.mark.fast


def test_read_text_rejects_bytes_that_are_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "skill.md"
    path.write_bytes(b"# Skill \xff\n")
    with pytest.raises(ParseError) as exc:
        read_text(path)
    assert exc.value.context == {"path": str(path)}


def test_read_text_reports_missing_file_as_parse_error(tmp_path: Path) -> None:
    with pytest.raises(ParseError):
        read_text(tmp_path / "missing.md")


def test_read_yaml_empty_and_invalid(tmp_path: Path) -> None:
    write_text(tmp_path / "empty.yaml", "")
    assert read_yaml(tmp_path / "empty.yaml") is None

    write_text(tmp_path / "bad.yaml", "a: [unclosed\n")
    with pytest.raises(ParseError, match="Invalid YAML"):
        read_yaml(tmp_path / "bad.yaml")


def test_ensure_directory_creates_parents_and_rejects_files(tmp_path: Path) -> None:
    target = ensure_directory(tmp_path / "a" / "b")
    assert target.is_dir()

    write_text(tmp_path / "file", "x")
    with pytest.raises(NotADirectoryError):
        ensure_directory(tmp_path / "file")
