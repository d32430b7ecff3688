"""
Config check use case — validate config.yaml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from devenv.core.config.loader import ConfigError, find_config_file, load_catalog
from devenv.core.models.tool import ToolCatalog
from devenv.core.services.tool_install.resolver import validate_catalog


@dataclass
class ConfigCheckResult:
    """Result of catalog validation."""

    valid: bool = False
    catalog: ToolCatalog | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "category_count": len(self.catalog.categories) if self.catalog else 0,
            "tool_count": len(self.catalog.tools) if self.catalog else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the catalog and report issues.

    Args:
        config_path: Optional explicit path to config.yaml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        result.errors.append("No config.yaml found.")
        return result
    result.config_path = config_path

    try:
        catalog = load_catalog(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.catalog = catalog

    if not catalog.categories:
        result.warnings.append("No categories defined. There is nothing to install.")

    for category in catalog.category_names():
        if not catalog.tools_in(category):
            result.warnings.append(f"Category '{category}' has no tools.")

    result.errors.extend(validate_catalog(catalog.tools))

    result.valid = len(result.errors) == 0
    return result
