from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "Print component types in dependency order"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        order = service(args).dependency_order(args.namespace)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success({"order": order}, "\n".join(order))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
