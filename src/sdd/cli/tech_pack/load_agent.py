from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "Show an agent's metadata with its skills resolved"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    parser.add_argument("--agent", required=True, help="Agent name from the agents registry")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        agent = service(args).load_agent(args.namespace, args.agent)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success(agent)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
