from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping


class SddError(Exception):
    """Base exception for sdd-system."""

    code: str = "SddError"
    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.code,
            "context": self.context,
        }


class SettingsError(SddError, ValueError):
    """Raised when the project settings file or one of its entries is malformed."""

    code = "SettingsError"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SddError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ProjectNotFoundError(SddError, FileNotFoundError):
    """Raised when no project root (settings file or package.json) can be found."""

    code = "ProjectNotFound"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SddError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class NamespaceNotFound(SddError, KeyError):
    """Raised when a tech pack namespace is not present in the settings entries."""

    code = "NamespaceNotFound"

    def __init__(self, namespace: str) -> None:
        msg = f'Tech pack "{namespace}" not found in settings'
        SddError.__init__(self, msg, context={"namespace": namespace})
        self.namespace = namespace

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class ManifestNotFound(SddError, FileNotFoundError):
    """Raised when a tech pack directory has no techpack.yaml."""

    code = "ManifestNotFound"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SddError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ParseError(SddError, ValueError):
    """Raised when a file cannot be read as UTF-8 or parsed into the expected shape."""

    code = "ParseError"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SddError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class FrontmatterError(ParseError):
    """Raised when a markdown file has no leading YAML frontmatter block."""


class SchemaViolation(SddError):
    """Raised when a tech pack fails validation.

    Carries every collected issue, not just the first one.
    """

    code = "SchemaViolation"

    def __init__(
        self,
        message: str,
        *,
        errors: Iterable[str] = (),
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.errors = list(errors)

    def to_json_error(self) -> Dict[str, Any]:
        payload = super().to_json_error()
        payload["errors"] = list(self.errors)
        return payload


class PathNotFound(SddError, FileNotFoundError):
    """Raised when a file referenced by a tech pack does not exist on disk."""

    code = "PathNotFound"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SddError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class UnresolvedSkillReference(SddError, LookupError):
    """Raised when a skill name is missing from the manifest's skills registry."""

    code = "UnresolvedSkillReference"

    def __init__(self, message: str, *, missing: Iterable[str]) -> None:
        missing_list = list(missing)
        SddError.__init__(self, message, context={"missing": missing_list})
        LookupError.__init__(self, message)
        self.missing = missing_list


class UnresolvedAgentReference(SddError, LookupError):
    """Raised when an agent name is missing from the manifest's agents registry."""

    code = "UnresolvedAgentReference"

    def __init__(self, message: str, *, missing: Iterable[str]) -> None:
        missing_list = list(missing)
        SddError.__init__(self, message, context={"missing": missing_list})
        LookupError.__init__(self, message)
        self.missing = missing_list


class UnknownComponent(SddError, LookupError):
    code = "UnknownComponent"

    def __init__(self, component: str) -> None:
        msg = f'Component "{component}" not found in manifest'
        SddError.__init__(self, msg, context={"component": component})
        LookupError.__init__(self, msg)
        self.component = component


class UnknownDependency(SddError, LookupError):
    code = "UnknownDependency"

    def __init__(self, component: str, dependency: str) -> None:
        msg = f'Component "{component}" depends on unknown component "{dependency}"'
        SddError.__init__(self, msg, context={"component": component, "dependency": dependency})
        LookupError.__init__(self, msg)
        self.component = component
        self.dependency = dependency


class DependencyCycle(SddError, ValueError):
    """Raised when component dependencies cannot be ordered.

    ``remaining`` holds every component left out of the order: the nodes on a
    cycle plus anything blocked behind one.
    """

    code = "DependencyCycle"

    def __init__(self, remaining: Iterable[str]) -> None:
        names = list(remaining)
        msg = f"Dependency cycle detected involving: {', '.join(names)}"
        SddError.__init__(self, msg, context={"remaining": names})
        ValueError.__init__(self, msg)
        self.remaining = names


class UnknownCommandNamespace(SddError, LookupError):
    code = "UnknownCommandNamespace"

    def __init__(self, command: str) -> None:
        msg = f'Command namespace "{command}" not found in manifest'
        SddError.__init__(self, msg, context={"command": command})
        LookupError.__init__(self, msg)
        self.command = command


class UnknownAction(SddError, LookupError):
    code = "UnknownAction"

    def __init__(self, command: str, action: str) -> None:
        msg = f'Action "{action}" not found in command namespace "{command}"'
        SddError.__init__(self, msg, context={"command": command, "action": action})
        LookupError.__init__(self, msg)
        self.command = command
        self.action = action


__all__ = [
    "SddError",
    "SettingsError",
    "ProjectNotFoundError",
    "NamespaceNotFound",
    "ManifestNotFound",
    "ParseError",
    "FrontmatterError",
    "SchemaViolation",
    "PathNotFound",
    "UnresolvedSkillReference",
    "UnresolvedAgentReference",
    "UnknownComponent",
    "UnknownDependency",
    "DependencyCycle",
    "UnknownCommandNamespace",
    "UnknownAction",
]
