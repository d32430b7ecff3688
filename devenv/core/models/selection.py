"""
Selection models — what the user asked to install.

The interactive selector groups picks by category. Once handed to the
orchestrator the grouping carries no meaning: it is flattened into a
set of tool identifiers.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field


class CategorySelection(BaseModel):
    """Tools picked from one category."""

    category: str
    tools: list[str] = Field(default_factory=list)


class Selection(BaseModel):
    """The user's picks, grouped by category in display order."""

    categories: list[CategorySelection] = Field(default_factory=list)

    @classmethod
    def from_tool_ids(cls, tool_ids: Iterable[str], category: str = "selected") -> Selection:
        """Build a single-group selection (non-interactive installs)."""
        return cls(categories=[CategorySelection(category=category, tools=list(tool_ids))])

    def tool_ids(self) -> set[str]:
        """Flatten to a set of identifiers; duplicates collapse."""
        return {tool_id for group in self.categories for tool_id in group.tools}

    @property
    def is_empty(self) -> bool:
        return not self.tool_ids()
