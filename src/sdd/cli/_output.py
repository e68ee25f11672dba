"""Unified CLI output formatting utilities.

Every command reports through :class:`OutputFormatter` so the JSON envelope
and the text rendering stay consistent across domains.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from sdd.core.exceptions import SddError


class OutputFormatter:
    """Unified output formatter for CLI commands.

    In JSON mode every result is a single envelope on stdout::

        {"success": true, "data": ..., "message": "..."}
        {"success": false, "error": "...", "code": "...", "errors": [...]}
    """

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def success(self, data: Any = None, message: Optional[str] = None) -> None:
        """Output a success result.

        Args:
            data: Result payload (omitted from the envelope when None)
            message: Human-readable message (printed as-is in text mode)
        """
        if self.json_mode:
            output: Dict[str, Any] = {"success": True}
            if data is not None:
                output["data"] = data
            if message:
                output["message"] = message
            self.json_output(output)
        elif message:
            print(message)
        elif data is not None:
            print(format_json(data, self.indent))

    def error(self, error: Exception, message: Optional[str] = None) -> None:
        """Output an error result.

        ``SddError`` subclasses contribute their ``code`` and any extra fields
        of ``to_json_error()`` (e.g. the collected validation ``errors``).
        """
        msg = message or str(error)
        if self.json_mode:
            output: Dict[str, Any] = {"success": False, "error": msg}
            if isinstance(error, SddError):
                payload = error.to_json_error()
                output["code"] = payload.get("code")
                if "errors" in payload:
                    output["errors"] = payload["errors"]
            else:
                output["code"] = type(error).__name__
            self.json_output(output)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))


def format_json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, default=str)


__all__ = ["OutputFormatter", "format_json"]
