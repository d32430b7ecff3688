"""
Orchestration — the installation orchestrator.

Ties the resolver and the installers together:

    selection → flatten to ids → resolve order → dispatch each tool → collect results

Runs strictly one tool at a time. A tool's failure is recorded on its
result and never stops the run; dependents of a failed tool are still
attempted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from devenv.adapters.base import CommandExecutor
from devenv.core.models.result import InstallationResult
from devenv.core.models.selection import Selection
from devenv.core.models.tool import InstallMethod, ToolDescriptor
from devenv.core.services.tool_install.errors import (
    InstallError,
    UnknownInstallMethodError,
)
from devenv.core.services.tool_install.installers import (
    AptInstaller,
    Installer,
    ManualInstaller,
    ScriptInstaller,
)
from devenv.core.services.tool_install.resolver import resolve_install_order

logger = logging.getLogger(__name__)

ResultCallback = Callable[[InstallationResult], None]


class InstallationOrchestrator:
    """Dispatches resolved tools to the installer for their method.

    Features:
        - Register/look up installers by ``InstallMethod``
        - Resolve selections into a dependencies-first order
        - Install each tool once, isolating failures per tool
    """

    def __init__(self, installers: list[Installer] | None = None):
        self._installers: dict[InstallMethod, Installer] = {}
        for installer in installers or []:
            self.register(installer)

    def register(self, installer: Installer) -> None:
        method = installer.method
        if method in self._installers:
            logger.warning("Overwriting existing installer: %s", method.value)
        self._installers[method] = installer
        logger.debug("Registered installer: %s", method.value)

    def get(self, method: InstallMethod) -> Installer | None:
        return self._installers.get(method)

    def execute_installations(
        self,
        selection: Selection,
        catalog: Mapping[str, ToolDescriptor],
        *,
        on_result: ResultCallback | None = None,
    ) -> dict[str, InstallationResult]:
        """Install every selected tool and its prerequisites.

        Args:
            selection: The user's picks, grouped by category.
            catalog: All known tools keyed by id.
            on_result: Called with each result as soon as it is recorded.

        Returns:
            One result per tool in the resolved order, keyed by tool id
            and ordered as installed. Requested ids missing from the
            catalog get no entry.
        """
        selected = self._extract_selected_tools(selection)
        install_order = resolve_install_order(selected, catalog)
        logger.info("Install order: %s", ", ".join(install_order) or "(empty)")

        results: dict[str, InstallationResult] = {}
        for tool_id in install_order:
            tool = catalog.get(tool_id)
            if tool is None:
                # resolver only emits catalog members
                logger.error("Resolved tool '%s' vanished from the catalog", tool_id)
                continue

            result = self.install_tool(tool)
            results[tool_id] = result

            status_marker = "✓" if result.success else "✗"
            logger.info(
                "%s %s → %s",
                status_marker,
                tool_id,
                "ok" if result.success else f"failed ({result.error})",
            )
            if on_result is not None:
                on_result(result)

        return results

    def install_tool(self, tool: ToolDescriptor) -> InstallationResult:
        """Install one tool with the installer matching its method."""
        method = tool.method
        installer = self._installers.get(method) if method is not None else None
        if installer is None:
            return InstallationResult.failure(
                tool, UnknownInstallMethodError(tool.install_method)
            )

        try:
            installer.install(tool)
        except InstallError as e:
            return InstallationResult.failure(tool, e)
        except Exception as e:
            # installers should only raise InstallError
            logger.error("Installer %s raised for '%s': %s", method.value, tool.id, e)
            return InstallationResult.failure(tool, e)

        return InstallationResult.ok(tool)

    @staticmethod
    def _extract_selected_tools(selection: Selection) -> set[str]:
        return selection.tool_ids()


def create_orchestrator(
    executor: CommandExecutor | None = None,
    echo: Callable[[str], object] | None = None,
) -> InstallationOrchestrator:
    """Build an orchestrator with the apt, script and manual installers.

    Args:
        executor: Command executor shared by apt and script installs.
            Defaults to a real ``ShellCommandExecutor``.
        echo: Output function for manual instructions (default: click.echo).
    """
    if executor is None:
        from devenv.adapters.shell.command import ShellCommandExecutor

        executor = ShellCommandExecutor()

    return InstallationOrchestrator(
        installers=[
            AptInstaller(executor),
            ScriptInstaller(executor),
            ManualInstaller(echo),
        ]
    )
