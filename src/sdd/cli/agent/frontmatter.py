from __future__ import annotations

import argparse
import sys

from sdd.cli import OutputFormatter, add_json_flag
from sdd.core.agents import agent_frontmatter
from sdd.core.exceptions import SddError

SUMMARY = "Print the YAML frontmatter metadata of an agent file"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--path", required=True, help="Agent markdown file")
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    out = OutputFormatter(json_mode=bool(args.json))
    try:
        fm = agent_frontmatter(args.path)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success(fm)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
