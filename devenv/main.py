"""
DevEnv — CLI entrypoint.

Usage:
    devenv --help
    devenv install
    devenv status --verbose
    devenv config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from devenv import __version__
from devenv.core.observability.logging_config import (
    LOG_FILE_ENV_VAR,
    LOG_FILE_LEVEL_ENV_VAR,
    resolve_level,
    setup_logging,
)

# ── Status table layout ─────────────────────────────────────────
TOOL_NAME_WIDTH = 18
STATUS_WIDTH = 9
VERSION_WIDTH = 14


@click.group()
@click.version_option(version=__version__, prog_name="devenv")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config.yaml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """DevEnv - Automated developer environment setup.

    Installs and configures development tools from a categorized
    catalog, resolving dependencies between them.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(LOG_FILE_ENV_VAR),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV_VAR),
    )


def _format_status(installed: bool) -> str:
    return "✓" if installed else "✗"


def _format_value(value: str) -> str:
    return value or "-"


def format_status_table(rows: list, verbose: bool = False) -> str:
    """Render status rows as the fixed-width status table."""
    lines: list[str] = []
    if verbose:
        lines.append(
            f"{'Tool Name':<{TOOL_NAME_WIDTH}} {'Binary':<{STATUS_WIDTH}} "
            f"{'Config':<{STATUS_WIDTH}} {'Version':<{VERSION_WIDTH}} Path"
        )
        lines.append("-" * 65)
    else:
        lines.append(
            f"{'Tool Name':<{TOOL_NAME_WIDTH}} {'Binary':<{STATUS_WIDTH}} "
            f"{'Config':<{STATUS_WIDTH}} Version"
        )
        lines.append("-" * 46)

    for row in rows:
        status = row.status
        line = (
            f"{row.tool.label:<{TOOL_NAME_WIDTH}} "
            f"{_format_status(status.binary_installed):<{STATUS_WIDTH}} "
            f"{_format_status(status.config_applied):<{STATUS_WIDTH}} "
        )
        if verbose:
            line += f"{_format_value(status.version):<{VERSION_WIDTH}} {_format_value(status.path)}"
        else:
            line += _format_value(status.version)
        lines.append(line)

    return "\n".join(lines) + "\n"


@cli.command()
@click.option(
    "--verbose", "verbose_table", is_flag=True,
    help="Verbose output including installation paths and version information.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, verbose_table: bool, as_json: bool) -> None:
    """Display installation status for all tools."""
    from devenv.core.use_cases.status import get_status

    result = get_status(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.secho(f"Environment: {result.environment}", fg="cyan")
        click.echo()

    click.echo(format_status_table(result.rows, verbose=verbose_table), nl=False)

    if not ctx.obj.get("quiet"):
        click.echo()
        click.echo(f"{result.installed_count}/{len(result.rows)} tools installed")


@cli.group()
def config() -> None:
    """Catalog configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate config.yaml: methods, parameters, dependencies, cycles."""
    from devenv.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    catalog = result.catalog
    if result.valid and catalog is not None:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Categories: {len(catalog.categories)}")
        click.echo(f"   Tools: {len(catalog.tools)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid or catalog is None:
        sys.exit(1)


# ── Register sub-commands from devenv/ui/cli/ ─────────────────────

from devenv.ui.cli.install import install  # noqa: E402

cli.add_command(install)


if __name__ == "__main__":
    cli()
