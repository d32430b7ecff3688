"""
APT installer — system packages through the Debian/Ubuntu package manager.

Always two commands per install, in this order: refresh the package
index, then install the tool's ``package_name``, which may name several
whitespace-separated packages.
"""

from __future__ import annotations

import logging
import shlex

from devenv.adapters.base import CommandExecutor
from devenv.core.models.tool import InstallMethod, ToolDescriptor
from devenv.core.services.tool_install.errors import (
    CommandExecutionError,
    MissingParameterError,
)
from devenv.core.services.tool_install.installers.base import Installer

logger = logging.getLogger(__name__)

APT_UPDATE_COMMAND = "sudo apt update"
APT_INSTALL_COMMAND = "sudo apt install -y {package}"


class AptInstaller(Installer):
    def __init__(self, executor: CommandExecutor):
        self.executor = executor

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.APT

    def install(self, tool: ToolDescriptor) -> None:
        package = tool.package_name.strip()
        if not package:
            raise MissingParameterError(
                f"package name is required for apt installation of '{tool.id}'"
            )

        try:
            self.executor.execute(APT_UPDATE_COMMAND)
        except CommandExecutionError as e:
            raise CommandExecutionError(
                f"failed to update package list: {e}",
                command=e.command,
                returncode=e.returncode,
                stderr=e.stderr,
            ) from e

        logger.info("apt: installing %s", package)
        try:
            self.executor.execute(APT_INSTALL_COMMAND.format(package=_quote_packages(package)))
        except CommandExecutionError as e:
            raise CommandExecutionError(
                f"failed to install package {package}: {e}",
                command=e.command,
                returncode=e.returncode,
                stderr=e.stderr,
            ) from e


def _quote_packages(package_name: str) -> str:
    # package_name may list several packages separated by whitespace
    return " ".join(shlex.quote(name) for name in package_name.split())
