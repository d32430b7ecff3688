"""Resolver — turns a selection into an ordered install plan."""

from devenv.core.services.tool_install.resolver.dependency_resolution import (  # noqa: F401
    find_cycles,
    resolve_install_order,
    validate_catalog,
)
