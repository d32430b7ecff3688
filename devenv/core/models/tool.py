"""
Tool models — the installable units of the catalog.

A tool is declared once in config.yaml under a category and is
read-only for the rest of the process. The install method stays a
raw string here because it comes from an open-ended config source;
``ToolDescriptor.method`` maps it onto the closed ``InstallMethod`` set.
"""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, model_validator


class InstallMethod(str, Enum):
    """Installation mechanisms the orchestrator knows how to dispatch."""

    APT = "apt"
    SCRIPT = "script"
    MANUAL = "manual"


class ToolDescriptor(BaseModel):
    """One installable tool as declared in the catalog."""

    id: str = ""                    # catalog key, filled in by ToolCatalog
    display_name: str = ""
    binary_name: str = ""
    install_method: str = ""

    # ── Method parameters ────────────────────────────────────────
    package_name: str = ""          # apt
    install_script: str = ""        # script
    notes: str = Field(             # manual
        default="",
        validation_alias=AliasChoices("notes", "wsl_notes"),
    )

    dependencies: list[str] = Field(default_factory=list)

    # ── Detection-only ───────────────────────────────────────────
    config_path: str = ""
    check_command: str = ""
    version: str = ""

    @property
    def method(self) -> InstallMethod | None:
        """The install method as an enum member, or None if unrecognized."""
        try:
            return InstallMethod(self.install_method)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return self.display_name or self.id


class ToolCatalog(BaseModel):
    """Root of config.yaml: tools grouped by category.

    Tool identifiers must be unique across all categories; the
    flattened ``tools`` mapping is what the installer core consumes.
    """

    categories: dict[str, dict[str, ToolDescriptor]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def assign_ids(self) -> ToolCatalog:
        seen: dict[str, str] = {}
        for category, tools in self.categories.items():
            for tool_id, tool in tools.items():
                if tool_id in seen:
                    raise ValueError(
                        f"Tool '{tool_id}' is declared in both "
                        f"'{seen[tool_id]}' and '{category}'"
                    )
                seen[tool_id] = category
                tool.id = tool_id
        return self

    @property
    def tools(self) -> dict[str, ToolDescriptor]:
        """All tools keyed by identifier, category grouping dropped."""
        return {
            tool_id: tool
            for tools in self.categories.values()
            for tool_id, tool in tools.items()
        }

    def category_names(self) -> list[str]:
        return sorted(self.categories)

    def tools_in(self, category: str) -> dict[str, ToolDescriptor]:
        """Tools of one category (empty if the category is unknown)."""
        return self.categories.get(category, {})

    def category_of(self, tool_id: str) -> str | None:
        for category, tools in self.categories.items():
            if tool_id in tools:
                return category
        return None
