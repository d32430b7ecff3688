"""
Installation result models — the outcome contract of an install run.

Exactly one ``InstallationResult`` is recorded per tool in the resolved
install order. Failures never raise out of the orchestrator; they land
here with ``success=False`` and the error that caused them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from devenv.core.models.tool import ToolDescriptor


@dataclass(frozen=True)
class InstallationResult:
    """Outcome of installing a single tool."""

    tool: ToolDescriptor
    success: bool
    error: Exception | None = None

    @classmethod
    def ok(cls, tool: ToolDescriptor) -> InstallationResult:
        return cls(tool=tool, success=True)

    @classmethod
    def failure(cls, tool: ToolDescriptor, error: Exception) -> InstallationResult:
        return cls(tool=tool, success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tool": self.tool.id,
            "display_name": self.tool.label,
            "install_method": self.tool.install_method,
            "success": self.success,
            "error": str(self.error) if self.error else None,
        }


@dataclass
class InstallReport:
    """All results of one run, keyed by tool id in install order."""

    results: dict[str, InstallationResult] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results.values() if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def all_ok(self) -> bool:
        return self.failed == 0

    @property
    def status(self) -> str:
        if self.failed == 0:
            return "ok"
        if self.succeeded > 0:
            return "partial"
        return "failed"

    def failures(self) -> dict[str, InstallationResult]:
        return {tool_id: r for tool_id, r in self.results.items() if not r.success}

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "install_order": list(self.results),
            "results": [r.to_dict() for r in self.results.values()],
        }
