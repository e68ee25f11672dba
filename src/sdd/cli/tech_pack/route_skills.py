from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "Resolve the skills and agents a tech pack contributes to a phase"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    parser.add_argument("--phase", required=True, help="Workflow phase (e.g. plan, implement)")
    parser.add_argument("--component", help="Also resolve this component type's skills")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        data = service(args).route_skills(args.namespace, args.phase, args.component)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success(data)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
