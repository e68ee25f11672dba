from __future__ import annotations

import argparse
import sys

from sdd.cli import add_namespace_arg, add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "Look up the handler for a tech pack command action"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_namespace_arg(parser)
    # dest differs from the option name: "command" is taken by the dispatcher.
    parser.add_argument("--command", dest="command_namespace", required=True, help="Command namespace")
    parser.add_argument("--action", required=True, help="Action within the command namespace")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        data = service(args).route_command(args.namespace, args.command_namespace, args.action)
    except SddError as exc:
        out.error(exc)
        return 1

    out.success(data)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
