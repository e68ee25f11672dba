from __future__ import annotations

import argparse

from sdd.cli import OutputFormatter, get_repo_root
from sdd.core.techpacks import TechPackService


def formatter(args: argparse.Namespace) -> OutputFormatter:
    return OutputFormatter(json_mode=bool(getattr(args, "json", False)))


def service(args: argparse.Namespace) -> TechPackService:
    return TechPackService(project_root=get_repo_root(args))
