"""Orchestration — top-level install coordination."""

from devenv.core.services.tool_install.orchestration.orchestrator import (  # noqa: F401
    InstallationOrchestrator,
    ResultCallback,
    create_orchestrator,
)
