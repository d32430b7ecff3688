"""
Interactive tool selection — one prompt per category.

Each category lists its tools numbered, with a marker for tools whose
binary is already on PATH. The user answers with numbers or tool ids,
comma- or space-separated; a blank answer skips the category.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

import click

from devenv.core.models.selection import CategorySelection, Selection
from devenv.core.models.status import ToolStatus
from devenv.core.models.tool import ToolCatalog, ToolDescriptor

_SPLIT_RE = re.compile(r"[,\s]+")


def parse_tool_args(values: tuple[str, ...] | list[str]) -> list[str]:
    """Split repeated/comma-separated ``--tool`` values into ids."""
    ids: list[str] = []
    for value in values:
        for part in _SPLIT_RE.split(value.strip()):
            if part and part not in ids:
                ids.append(part)
    return ids


def parse_answer(answer: str, tool_ids: list[str]) -> list[str]:
    """Map a prompt answer onto tool ids.

    Args:
        answer: Raw user input, e.g. ``"1, 3"`` or ``"git vim"``.
        tool_ids: The category's tools in the order they were listed.

    Raises:
        click.BadParameter: For an out-of-range number or unknown id.
    """
    picked: list[str] = []
    for token in _SPLIT_RE.split(answer.strip()):
        if not token:
            continue
        if token.isdigit():
            index = int(token)
            if not 1 <= index <= len(tool_ids):
                raise click.BadParameter(f"{index} is not between 1 and {len(tool_ids)}")
            tool_id = tool_ids[index - 1]
        elif token in tool_ids:
            tool_id = token
        else:
            raise click.BadParameter(f"unknown tool '{token}'")
        if tool_id not in picked:
            picked.append(tool_id)
    return picked


def _option_line(index: int, tool: ToolDescriptor, status: ToolStatus | None) -> str:
    marker = " (installed)" if status and status.binary_installed else ""
    deps = f"  [needs: {', '.join(tool.dependencies)}]" if tool.dependencies else ""
    return f"  {index:>2}. {tool.label} ({tool.id}){marker}{deps}"


def prompt_selection(
    catalog: ToolCatalog,
    statuses: Mapping[str, ToolStatus] | None = None,
) -> Selection:
    """Ask the user which tools to install, category by category."""
    statuses = statuses or {}
    selection = Selection()

    for category in catalog.category_names():
        tools = catalog.tools_in(category)
        if not tools:
            continue
        tool_ids = sorted(tools)

        click.echo()
        click.secho(f"📦 {category}", fg="cyan", bold=True)
        for index, tool_id in enumerate(tool_ids, start=1):
            click.echo(_option_line(index, tools[tool_id], statuses.get(tool_id)))

        while True:
            answer = click.prompt(
                "   Select (numbers or ids, blank to skip)",
                default="",
                show_default=False,
            )
            try:
                picked = parse_answer(answer, tool_ids)
            except click.BadParameter as e:
                click.secho(f"   ❌ {e.format_message()}", fg="red")
                continue
            break

        if picked:
            selection.categories.append(CategorySelection(category=category, tools=picked))

    return selection
