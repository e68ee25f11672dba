from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "List the component types a tech pack declares"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        components = service(args).list_components(args.namespace)
    except SddError as exc:
        out.error(exc)
        return 1

    lines = [f"Component types ({len(components)}):"]
    for comp in components:
        deps = ", ".join(comp["depends_on"])
        suffix = f" (depends on: {deps})" if deps else ""
        lines.append(f"  {comp['name']} - {comp['description']}{suffix}")
    out.success({"components": components}, "\n".join(lines))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
