"""Adapters — bindings between the installer core and the host system.

Public re-exports for convenient access.
"""

from devenv.adapters.base import CommandExecutor
from devenv.adapters.mock import RecordingCommandExecutor
from devenv.adapters.shell.command import ShellCommandExecutor

__all__ = [
    "CommandExecutor",
    "RecordingCommandExecutor",
    "ShellCommandExecutor",
]
