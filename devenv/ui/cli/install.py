"""
CLI command for installing tools.

Thin wrapper over ``devenv.core.use_cases.install``: collects the
selection, picks the executor, and renders results.
"""

from __future__ import annotations

import functools
import json
import sys

import click

from devenv.core.models.result import InstallationResult, InstallReport
from devenv.core.models.selection import Selection

RESULTS_HEADER = "=== Installation Results ==="
SUMMARY_HEADER = "=== Summary ==="
STATUS_CMD = "devenv status"
RETRY_CMD = "devenv install"


def _print_result(result: InstallationResult) -> None:
    tool = result.tool
    if result.success:
        click.secho("✓ ", fg="green", nl=False)
        click.echo(f"{tool.label} ({tool.id}) - installed successfully")
    else:
        click.secho("✗ ", fg="red", nl=False)
        click.echo(f"{tool.label} ({tool.id}) - installation failed: {result.error}")


def _print_summary(report: InstallReport) -> None:
    click.echo()
    click.secho(SUMMARY_HEADER, bold=True)
    click.echo(f"Total attempted: {report.total}")
    click.echo(f"Successful: {report.succeeded}")
    click.echo(f"Failed: {report.failed}")

    if report.failed > 0:
        click.echo()
        click.secho("Some installations failed. You can:", fg="yellow")
        click.echo(f"- Run '{STATUS_CMD}' to check current tool status")
        click.echo(f"- Re-run '{RETRY_CMD}' to retry failed installations")
    elif report.succeeded > 0:
        click.echo()
        click.secho("All installations completed successfully!", fg="green")
        click.echo(f"Run '{STATUS_CMD}' to verify your development environment.")


@click.command()
@click.option(
    "--tool", "-t", "tools",
    multiple=True,
    help="Tool id to install (repeatable, or comma-separated).",
)
@click.option("--non-interactive", is_flag=True, help="Don't prompt; install only --tool ids.")
@click.option("--dry-run", is_flag=True, help="Print the commands instead of running them.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(
    ctx: click.Context,
    tools: tuple[str, ...],
    non_interactive: bool,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Install development tools and their dependencies.

    Without --tool, prompts for a selection per category.

    Examples:

        devenv install

        devenv install --non-interactive --tool zsh,vim,git

        devenv install -t lazydocker --dry-run
    """
    from devenv.adapters.mock import RecordingCommandExecutor
    from devenv.adapters.shell.command import ShellCommandExecutor
    from devenv.core.config.loader import ConfigError, load_catalog
    from devenv.core.services.detection import ToolDetector, detect_environment
    from devenv.core.use_cases.install import run_install
    from devenv.ui.cli.selection import parse_tool_args, prompt_selection

    try:
        catalog = load_catalog(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    tool_ids = parse_tool_args(tools)
    if tool_ids:
        selection = Selection.from_tool_ids(tool_ids)
    elif non_interactive or as_json:
        click.secho("❌ No tools given. Use --tool with --non-interactive/--json.", fg="red")
        sys.exit(2)
    else:
        click.echo(f"Detected environment: {detect_environment()}")
        statuses = ToolDetector().detect_all(catalog.tools)
        selection = prompt_selection(catalog, statuses)

    if selection.is_empty:
        click.echo("No tools selected.")
        return

    if dry_run:
        executor = RecordingCommandExecutor()
    else:
        # JSON mode keeps stdout clean for the report
        executor = ShellCommandExecutor(capture_output=as_json)

    if as_json:
        result = run_install(
            selection,
            catalog=catalog,
            executor=executor,
            echo=functools.partial(click.echo, err=True),
        )
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error or (result.report and result.report.failed > 0):
            sys.exit(1)
        return

    click.echo()
    click.secho(RESULTS_HEADER, bold=True)
    result = run_install(
        selection,
        catalog=catalog,
        executor=executor,
        on_result=_print_result,
    )

    report = result.report
    if result.error or report is None:
        click.secho(f"❌ {result.error or 'install produced no report'}", fg="red")
        sys.exit(1)

    if result.unknown:
        click.echo()
        click.secho(f"⚠️  Unknown tools skipped: {', '.join(result.unknown)}", fg="yellow")

    if dry_run and isinstance(executor, RecordingCommandExecutor):
        click.echo()
        click.secho("[dry-run] Commands that would run:", fg="cyan")
        for command in executor.call_log:
            click.echo(f"   $ {command}")

    _print_summary(report)

    if report.failed > 0:
        sys.exit(1)
