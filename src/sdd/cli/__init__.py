"""
sdd-system CLI package.

Provides the command-line interface with auto-discovery of commands
from subfolders (tech_pack/, agent/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON envelope / text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json
from ._args import (
    add_json_flag,
    add_repo_root_flag,
    add_namespace_arg,
    add_standard_flags,
)
from ._utils import get_repo_root

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_namespace_arg",
    "add_standard_flags",
    # Utilities
    "get_repo_root",
]
