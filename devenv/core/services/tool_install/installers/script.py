"""
Script installer — runs a tool's install script with bash.
"""

from __future__ import annotations

import logging
import os
import shlex

from devenv.adapters.base import CommandExecutor
from devenv.core.models.tool import InstallMethod, ToolDescriptor
from devenv.core.services.tool_install.errors import (
    CommandExecutionError,
    MissingScriptPathError,
)
from devenv.core.services.tool_install.installers.base import Installer

logger = logging.getLogger(__name__)

SCRIPT_INSTALL_COMMAND = "bash {script}"


class ScriptInstaller(Installer):
    def __init__(self, executor: CommandExecutor):
        self.executor = executor

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.SCRIPT

    def install(self, tool: ToolDescriptor) -> None:
        script = os.path.expanduser(tool.install_script)
        if not script:
            raise MissingScriptPathError(
                "install script path is required for script installation method"
            )

        logger.info("script: running %s for %s", script, tool.id)
        try:
            self.executor.execute(SCRIPT_INSTALL_COMMAND.format(script=shlex.quote(script)))
        except CommandExecutionError as e:
            raise CommandExecutionError(
                f"failed to execute install script {script}: {e}",
                command=e.command,
                returncode=e.returncode,
                stderr=e.stderr,
            ) from e
