"""
Install use case — from a selection to per-tool install results.

Loads the catalog, detects the environment, runs the orchestrator and
wraps its result map in an ``InstallReport``. Collecting the selection
itself (interactive prompt or ``--tool``) is the CLI's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from devenv.adapters.base import CommandExecutor
from devenv.core.config.loader import ConfigError, load_catalog
from devenv.core.models.result import InstallReport
from devenv.core.models.selection import Selection
from devenv.core.models.tool import ToolCatalog
from devenv.core.services.detection import detect_environment
from devenv.core.services.tool_install.orchestration import (
    ResultCallback,
    create_orchestrator,
)

logger = logging.getLogger(__name__)


@dataclass
class InstallRunResult:
    """Result of an install run."""

    report: InstallReport | None = None
    environment: str = ""
    requested: list[str] | None = None
    unknown: list[str] | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["environment"] = self.environment
        result["requested"] = self.requested or []
        result["unknown"] = self.unknown or []
        if self.report:
            result["report"] = self.report.to_dict()
        return result


def run_install(
    selection: Selection,
    config_path: Path | None = None,
    catalog: ToolCatalog | None = None,
    executor: CommandExecutor | None = None,
    echo: Callable[[str], object] | None = None,
    on_result: ResultCallback | None = None,
) -> InstallRunResult:
    """Install the selected tools and their prerequisites.

    Args:
        selection: Tools to install, grouped by category.
        config_path: Optional explicit path to config.yaml.
        catalog: Pre-loaded catalog (skips loading from disk).
        executor: Command executor (default: real shell).
        echo: Output for manual-install instructions.
        on_result: Called as each tool's result is recorded.

    Returns:
        InstallRunResult with the per-tool report.
    """
    result = InstallRunResult()

    if catalog is None:
        try:
            catalog = load_catalog(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result

    result.environment = detect_environment()
    logger.info("Detected environment: %s", result.environment)

    tools = catalog.tools
    requested = sorted(selection.tool_ids())
    result.requested = requested
    result.unknown = [tool_id for tool_id in requested if tool_id not in tools]

    orchestrator = create_orchestrator(executor=executor, echo=echo)
    results = orchestrator.execute_installations(selection, tools, on_result=on_result)
    result.report = InstallReport(results=results)

    return result
