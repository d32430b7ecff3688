"""
Shell command executor — the single place installers reach a shell.

Commands run through ``sh -c`` (``shell=True``) exactly as written in the
installer. By default output streams straight to the user's terminal so
package managers can prompt for a sudo password; with
``capture_output=True`` stderr is folded into the raised error instead.
"""

from __future__ import annotations

import logging
import subprocess
import time

from devenv.adapters.base import CommandExecutor
from devenv.core.services.tool_install.errors import CommandExecutionError

logger = logging.getLogger(__name__)

# Tail of stderr kept on failures
_STDERR_TAIL = 2000


class ShellCommandExecutor(CommandExecutor):
    """Execute command lines through the system shell.

    Args:
        capture_output: Capture stdout/stderr instead of inheriting the
            terminal.
        timeout: Seconds before the command is killed. None waits forever.
    """

    def __init__(self, capture_output: bool = False, timeout: float | None = None):
        self.capture_output = capture_output
        self.timeout = timeout

    def execute(self, command: str) -> None:
        logger.debug("Executing: %s", command)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=self.capture_output,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandExecutionError(
                f"command timed out after {self.timeout}s: {command}",
                command=command,
            ) from e
        except OSError as e:
            raise CommandExecutionError(
                f"failed to launch command: {command}: {e}",
                command=command,
            ) from e

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if self.capture_output and result.stdout:
            logger.debug("%s stdout:\n%s", command, result.stdout.strip())

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()[-_STDERR_TAIL:]
            message = f"command exited with code {result.returncode}: {command}"
            if stderr:
                message = f"{message}\n{stderr}"
            raise CommandExecutionError(
                message,
                command=command,
                returncode=result.returncode,
                stderr=stderr,
            )

        logger.debug("Finished in %dms: %s", elapsed_ms, command)
