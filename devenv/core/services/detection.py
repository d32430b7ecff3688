"""
Detection — read-only probes of what is already on this machine.

Finds tool binaries on PATH, reads their versions, checks whether their
config file exists, and tells WSL apart from plain Linux. Probes never
raise: anything that cannot be determined is reported as absent.
"""

from __future__ import annotations

import logging
import os
import re
import shlex
import shutil
import subprocess
from collections.abc import Mapping
from pathlib import Path

from devenv.core.models.status import ToolStatus
from devenv.core.models.tool import ToolDescriptor

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"(\d+\.\d+(?:\.\d+)?)")

_PROC_VERSION = Path("/proc/version")


class ToolDetector:
    """Detects install state for catalog tools.

    Args:
        version_timeout: Seconds to wait for a ``--version`` probe.
    """

    def __init__(self, version_timeout: float = 5):
        self.version_timeout = version_timeout

    def detect_tool(self, tool: ToolDescriptor) -> ToolStatus:
        status = ToolStatus()

        binary = tool.binary_name or tool.id
        path = shutil.which(binary) if binary else None
        if path:
            status.binary_installed = True
            status.path = path
            status.version = self.get_version(tool, path) or ""

        if tool.config_path:
            status.config_applied = Path(tool.config_path).expanduser().exists()

        return status

    def detect_all(self, tools: Mapping[str, ToolDescriptor]) -> dict[str, ToolStatus]:
        return {tool_id: self.detect_tool(tool) for tool_id, tool in tools.items()}

    def get_version(self, tool: ToolDescriptor, binary_path: str) -> str | None:
        """Run the tool's version command and extract ``X.Y[.Z]``.

        Uses ``check_command`` when declared, else ``<binary> --version``.

        Returns:
            Version string, or None if it can't be determined.
        """
        cmd = shlex.split(tool.check_command) if tool.check_command else [binary_path, "--version"]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.version_timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Version probe failed for %s: %s", tool.id, e)
            return None

        match = _VERSION_RE.search(result.stdout or "") or _VERSION_RE.search(result.stderr or "")
        return match.group(1) if match else None


def detect_environment() -> str:
    """Return ``"wsl"`` when running under WSL, else ``"linux"``."""
    return "wsl" if is_wsl() else "linux"


def is_wsl() -> bool:
    # WSL2 sets this for every process
    if os.environ.get("WSL_DISTRO_NAME"):
        return True

    try:
        content = _PROC_VERSION.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False

    version = content.lower()
    return "microsoft" in version or "wsl" in version
