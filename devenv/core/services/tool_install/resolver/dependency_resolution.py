"""
Resolver — dependency ordering for selected tools.

Depth-first, post-order traversal with in-progress / done marking.
Requested ids and each tool's dependency list are sorted before
traversal so the order never depends on set or dict iteration.

Lenient by default: unknown ids are dropped and a cycle edge is
treated as already satisfied. ``strict=True`` turns both into
``ResolutionError`` subclasses.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from devenv.core.models.tool import InstallMethod, ToolDescriptor
from devenv.core.services.tool_install.errors import (
    DependencyCycleError,
    UnknownToolError,
)

logger = logging.getLogger(__name__)


def resolve_install_order(
    selected: Iterable[str],
    catalog: Mapping[str, ToolDescriptor],
    *,
    strict: bool = False,
) -> list[str]:
    """Compute a dependencies-first install order.

    Args:
        selected: Requested tool ids (duplicates are ignored).
        catalog: All known tools keyed by id. Never mutated.
        strict: Raise on unknown ids and cycles instead of skipping.

    Returns:
        Every requested catalog tool plus its transitive catalog
        dependencies, each exactly once, prerequisites first.

    Raises:
        UnknownToolError: strict mode, id missing from the catalog.
        DependencyCycleError: strict mode, a dependency cycle was hit.
    """
    done: set[str] = set()
    in_progress: list[str] = []
    order: list[str] = []

    def visit(tool_id: str) -> None:
        if tool_id in done:
            return
        if tool_id in in_progress:
            cycle = in_progress[in_progress.index(tool_id):] + [tool_id]
            if strict:
                raise DependencyCycleError(cycle)
            logger.warning(
                "Dependency cycle %s, treating '%s' as satisfied",
                " -> ".join(cycle), tool_id,
            )
            return

        in_progress.append(tool_id)
        for dep_id in sorted(catalog[tool_id].dependencies):
            if dep_id in catalog:
                visit(dep_id)
            elif strict:
                raise UnknownToolError(dep_id, required_by=tool_id)
            else:
                logger.debug("Ignoring unknown dependency '%s' of '%s'", dep_id, tool_id)
        in_progress.pop()

        done.add(tool_id)
        order.append(tool_id)

    for tool_id in sorted(set(selected)):
        if tool_id not in catalog:
            if strict:
                raise UnknownToolError(tool_id)
            logger.warning("Unknown tool '%s' requested, skipping", tool_id)
            continue
        visit(tool_id)

    return order


def find_cycles(catalog: Mapping[str, ToolDescriptor]) -> list[list[str]]:
    """Find dependency cycles across the whole catalog.

    Each cycle is reported once, as the path from its first visited
    member back to itself (e.g. ``["a", "b", "a"]``).
    """
    done: set[str] = set()
    in_progress: list[str] = []
    cycles: list[list[str]] = []
    seen: set[tuple[str, ...]] = set()

    def visit(tool_id: str) -> None:
        if tool_id in done:
            return
        if tool_id in in_progress:
            cycle = in_progress[in_progress.index(tool_id):] + [tool_id]
            key = _cycle_key(cycle)
            if key not in seen:
                seen.add(key)
                cycles.append(cycle)
            return
        in_progress.append(tool_id)
        for dep_id in sorted(catalog[tool_id].dependencies):
            if dep_id in catalog:
                visit(dep_id)
        in_progress.pop()
        done.add(tool_id)

    for tool_id in sorted(catalog):
        visit(tool_id)
    return cycles


def _cycle_key(cycle: list[str]) -> tuple[str, ...]:
    """Same key for every rotation of one cycle; ``cycle`` ends where it starts."""
    body = cycle[:-1]
    start = body.index(min(body))
    return tuple(body[start:] + body[:start])


def validate_catalog(catalog: Mapping[str, ToolDescriptor]) -> list[str]:
    """Check a catalog for problems the lenient resolver would hide.

    Checks for:
    - Unknown install methods
    - Empty method parameters (package name, script path)
    - Dependencies on tools missing from the catalog
    - Dependency cycles

    Returns:
        List of error strings (empty = valid).
    """
    errors: list[str] = []

    for tool_id in sorted(catalog):
        tool = catalog[tool_id]
        method = tool.method
        if method is None:
            errors.append(
                f"Tool '{tool_id}' has unknown install method '{tool.install_method}'"
            )
        elif method is InstallMethod.APT and not tool.package_name:
            errors.append(f"Tool '{tool_id}' uses apt but has no package_name")
        elif method is InstallMethod.SCRIPT and not tool.install_script:
            errors.append(f"Tool '{tool_id}' uses script but has no install_script")

        for dep_id in sorted(tool.dependencies):
            if dep_id not in catalog:
                errors.append(f"Tool '{tool_id}' depends on unknown tool '{dep_id}'")

    for cycle in find_cycles(catalog):
        errors.append(f"Dependency cycle: {' -> '.join(cycle)}")

    return errors
