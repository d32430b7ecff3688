"""
Manual installer — prints instructions, runs nothing.

Used for tools that cannot be installed unattended (GUI apps, things
that need a Windows-side install under WSL). Never fails.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from devenv.core.models.tool import InstallMethod, ToolDescriptor
from devenv.core.services.tool_install.installers.base import Installer

MANUAL_INSTALL_MSG = "Manual installation required for {name} ({binary})"
MANUAL_INSTRUCTIONS_MSG = "Installation instructions:\n{notes}"
MANUAL_FALLBACK_MSG = "No specific installation instructions provided. Please install {name} manually."
MANUAL_VERIFY_MSG = "Please complete the installation manually and run 'devenv status' to verify."


class ManualInstaller(Installer):
    """Emits human-readable instructions through ``echo``."""

    def __init__(self, echo: Callable[[str], object] | None = None):
        self.echo = echo or click.echo

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.MANUAL

    def install(self, tool: ToolDescriptor) -> None:
        self.echo(MANUAL_INSTALL_MSG.format(name=tool.label, binary=tool.binary_name))
        if tool.notes:
            self.echo(MANUAL_INSTRUCTIONS_MSG.format(notes=tool.notes))
        else:
            self.echo(MANUAL_FALLBACK_MSG.format(name=tool.label))
        self.echo(MANUAL_VERIFY_MSG)
