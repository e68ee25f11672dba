from __future__ import annotations

import argparse
import sys

from sdd.cli import add_standard_flags
from sdd.core.exceptions import SchemaViolation, SddError
from sdd.core.techpacks import validate_techpack

from ._shared import formatter

SUMMARY = "Validate a tech pack directory before installation"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--path", required=True, help="Tech pack directory containing techpack.yaml")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    out = formatter(args)
    try:
        result = validate_techpack(args.path)
        if not result.ok:
            raise SchemaViolation(
                result.format_report(),
                errors=result.errors,
                context={"path": str(result.techpack_dir)},
            )
    except SddError as exc:
        out.error(exc)
        return 1

    out.success(result.summary, result.format_report())
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
