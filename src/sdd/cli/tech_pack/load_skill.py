from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "Print a skill's content with <techpack-root> resolved"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    parser.add_argument("--skill", required=True, help="Skill name from the skills registry")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        skill = service(args).load_skill(args.namespace, args.skill)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success(skill, skill["content"])
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
