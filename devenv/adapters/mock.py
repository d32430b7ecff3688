"""
Recording executor — test double and dry-run backend.

Records every command line instead of running it. Configurable to fail
any command containing a given substring, which is how tests simulate
a broken ``apt`` or a failing install script.
"""

from __future__ import annotations

from devenv.adapters.base import CommandExecutor
from devenv.core.services.tool_install.errors import CommandExecutionError


class RecordingCommandExecutor(CommandExecutor):
    """Records commands; succeeds unless told otherwise."""

    def __init__(self, failures: dict[str, str] | None = None):
        self._failures: dict[str, str] = dict(failures or {})
        self._call_log: list[str] = []

    @property
    def call_log(self) -> list[str]:
        """All command lines received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def set_failure(self, pattern: str, error: str = "Mock failure") -> None:
        """Fail every command containing ``pattern``."""
        self._failures[pattern] = error

    def execute(self, command: str) -> None:
        self._call_log.append(command)
        for pattern, error in self._failures.items():
            if pattern in command:
                raise CommandExecutionError(error, command=command, returncode=1)

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()
