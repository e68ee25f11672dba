from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "Resolve a path relative to a tech pack directory"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    parser.add_argument("--path", required=True, help="Path relative to the tech pack root")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        resolved = service(args).resolve_path(args.namespace, args.path)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success({"resolved_path": resolved}, resolved)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
