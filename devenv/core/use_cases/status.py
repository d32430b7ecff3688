"""
Status use case — installation state of every catalog tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from devenv.core.config.loader import ConfigError, load_catalog
from devenv.core.models.status import ToolStatus
from devenv.core.models.tool import ToolDescriptor
from devenv.core.services.detection import ToolDetector, detect_environment


@dataclass
class ToolStatusRow:
    category: str
    tool: ToolDescriptor
    status: ToolStatus

    def to_dict(self) -> dict:
        return {
            "id": self.tool.id,
            "category": self.category,
            "display_name": self.tool.label,
            **self.status.model_dump(),
        }


@dataclass
class StatusResult:
    """Detected state of all tools, in category then tool order."""

    environment: str = ""
    rows: list[ToolStatusRow] = field(default_factory=list)
    error: str | None = None

    @property
    def installed_count(self) -> int:
        return sum(1 for row in self.rows if row.status.binary_installed)

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "environment": self.environment,
            "total": len(self.rows),
            "installed": self.installed_count,
            "tools": [row.to_dict() for row in self.rows],
        }


def get_status(
    config_path: Path | None = None,
    detector: ToolDetector | None = None,
) -> StatusResult:
    """Detect every tool in the catalog.

    Args:
        config_path: Optional explicit path to config.yaml.
        detector: Optional detector (tests inject one).
    """
    result = StatusResult()

    try:
        catalog = load_catalog(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    detector = detector or ToolDetector()
    result.environment = detect_environment()

    for category in catalog.category_names():
        tools = catalog.tools_in(category)
        for tool_id in sorted(tools):
            tool = tools[tool_id]
            result.rows.append(
                ToolStatusRow(category=category, tool=tool, status=detector.detect_tool(tool))
            )

    return result
