from __future__ import annotations

from pathlib import Path

import pytest

from helpers.io_utils import write_text
from sdd.core.agents import agent_frontmatter
from sdd.core.exceptions import FrontmatterError, ParseError, PathNotFound

pytestmark = pytest.mark.fast


def test_extracts_known_fields_only(tmp_path: Path) -> None:
    path = write_text(
        tmp_path / "agent.md",
        "---\n"
        "name: reviewer\n"
        "model: opus\n"
        "tools: [Read, Grep]\n"
        "skills: [review-checklist]\n"
        "description: Reviews changes\n"
        "color: blue\n"
        "---\n"
        "\n"
        "# Reviewer\n"
        "skills: not-frontmatter\n",
    )

    assert agent_frontmatter(path) == {
        "name": "reviewer",
        "model": "opus",
        "tools": ["Read", "Grep"],
        "skills": ["review-checklist"],
        "description": "Reviews changes",
    }


def test_empty_values_are_omitted(tmp_path: Path) -> None:
    path = write_text(tmp_path / "agent.md", "---\nname: helper\nskills: []\nmodel:\n---\nBody\n")
    assert agent_frontmatter(path) == {"name": "helper"}


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PathNotFound):
        agent_frontmatter(tmp_path / "nope.md")


def test_no_frontmatter_block(tmp_path: Path) -> None:
    path = write_text(tmp_path / "agent.md", "# Just markdown\n")
    with pytest.raises(FrontmatterError, match="No YAML frontmatter"):
        agent_frontmatter(path)


def test_invalid_yaml_in_block(tmp_path: Path) -> None:
    path = write_text(tmp_path / "agent.md", "---\nname: [broken\n---\n")
    with pytest.raises(ParseError):
        agent_frontmatter(path)


def test_block_must_be_mapping(tmp_path: Path) -> None:
    path = write_text(tmp_path / "agent.md", "---\n- a\n- b\n---\n")
    with pytest.raises(ParseError, match="mapping"):
        agent_frontmatter(path)


def test_file_that_is_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "agent.md"
    path.write_bytes(b"---\nname: \xff\xfe\n---\n")
    with pytest.raises(ParseError, match="not valid UTF-8"):
        agent_frontmatter(path)
