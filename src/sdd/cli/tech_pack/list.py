from __future__ import annotations

import argparse
import sys

from sdd.cli import add_standard_flags
from sdd.core.exceptions import SddError

from ._shared import formatter, service

SUMMARY = "List installed tech packs"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        techpacks = service(args).list_techpacks()
    except SddError as exc:
        out.error(exc)
        return 1

    if not techpacks:
        out.success({"techpacks": techpacks}, "No tech packs installed")
        return 0

    lines = ["Installed tech packs:"]
    for tp in techpacks:
        lines.append(f"  {tp['namespace']} - {tp['name']} v{tp['version']} ({tp['mode']})")
    out.success({"techpacks": techpacks}, "\n".join(lines))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
