"""
Install error taxonomy.

Installers raise ``InstallError`` subclasses; the orchestrator catches
them and records them on the tool's result. Resolution errors only
surface in strict mode.
"""

from __future__ import annotations


class InstallError(Exception):
    """Base class for a single tool's installation failure."""


class CommandExecutionError(InstallError):
    """An external command failed to launch or exited non-zero."""

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class MissingParameterError(InstallError):
    """A method parameter required by an installer is empty."""


class MissingScriptPathError(MissingParameterError):
    """Script installation requested without an ``install_script``."""


class UnknownInstallMethodError(InstallError):
    """The tool's install method matches no registered installer."""

    def __init__(self, method: str):
        super().__init__(f"unknown install method: {method}")
        self.method = method


class ResolutionError(Exception):
    """Dependency resolution failed (strict mode only)."""


class DependencyCycleError(ResolutionError):
    """A tool transitively depends on itself."""

    def __init__(self, cycle: list[str]):
        super().__init__(f"circular dependency: {' -> '.join(cycle)}")
        self.cycle = cycle


class UnknownToolError(ResolutionError):
    """A requested or depended-on tool is not in the catalog."""

    def __init__(self, tool_id: str, required_by: str | None = None):
        if required_by:
            message = f"unknown tool '{tool_id}' (required by '{required_by}')"
        else:
            message = f"unknown tool '{tool_id}'"
        super().__init__(message)
        self.tool_id = tool_id
        self.required_by = required_by
