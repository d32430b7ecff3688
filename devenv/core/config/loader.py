"""
Configuration loader — reads config.yaml into the tool catalog.

This is the primary entry point for loading the catalog. It reads
YAML, validates against Pydantic schemas, and returns typed domain
objects.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from devenv.core.models.tool import ToolCatalog

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "config.yaml"

# Explicit config path override
CONFIG_ENV_VAR = "DEVENV_CONFIG"


class ConfigError(Exception):
    """Raised when the catalog configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Locate config.yaml.

    ``$DEVENV_CONFIG`` wins when set. Otherwise search from the given
    directory upward, so commands work from any subdirectory of a
    dotfiles checkout.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to config.yaml, or None if not found.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()

    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_catalog(path: Path | None = None) -> ToolCatalog:
    """Load and validate the tool catalog.

    Args:
        path: Explicit path to config.yaml. If None, searches for one.

    Returns:
        Validated ToolCatalog.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(
            f"No {CONFIG_FILE} found. "
            f"Create one, set ${CONFIG_ENV_VAR}, or specify --config."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading catalog from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # A category with no tools parses as None
    categories = data.get("categories") or {}
    if isinstance(categories, dict):
        data["categories"] = {name: tools or {} for name, tools in categories.items()}

    try:
        catalog = ToolCatalog.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid catalog configuration in {path}: {e}") from e

    _resolve_script_paths(catalog, path.absolute().parent)

    logger.info(
        "Loaded %d tools in %d categories from %s",
        len(catalog.tools), len(catalog.categories), path,
    )
    return catalog


def _resolve_script_paths(catalog: ToolCatalog, base_dir: Path) -> None:
    """Make every ``install_script`` absolute.

    ``~`` is expanded; relative paths are taken from the directory that
    holds config.yaml, not the working directory.
    """
    for tool in catalog.tools.values():
        if not tool.install_script:
            continue
        script = Path(tool.install_script).expanduser()
        if not script.is_absolute():
            script = base_dir / script
        tool.install_script = str(script)
