"""
Command executor base — the contract between installers and the shell.

Installers never call subprocess directly. They hand a command line to
a ``CommandExecutor``, which runs it to completion and raises
``CommandExecutionError`` on launch failure or a non-zero exit.
Output handling is the executor's concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CommandExecutor(ABC):
    """Runs one shell command line to completion."""

    @abstractmethod
    def execute(self, command: str) -> None:
        """Run ``command`` and wait for it.

        Raises:
            CommandExecutionError: The command could not be launched,
                timed out, or exited non-zero.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
