from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "Show a manifest summary for an installed tech pack"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    add_standard_flags(parser)


def _render(info: dict) -> str:
    lines = [
        f"{info['name']} v{info['version']} ({info['namespace']})",
        f"  {info['description']}",
        f"  path: {info['path']}",
        f"  component types: {', '.join(info['component_types']) or '-'}",
        f"  commands: {', '.join(info['commands']) or '-'}",
        f"  phases: {', '.join(info['phases']) or '-'}",
        f"  skills: {info['skills']}, agents: {info['agents']}",
    ]
    return "\n".join(lines)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        info = service(args).info(args.namespace)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success(info, _render(info))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
