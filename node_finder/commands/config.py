"""Settings commands for node-finder."""

from __future__ import annotations

import sys

import click
from rich.table import Table

from ..console import console
from ..console import err_console
from ..paths import create_settings_manager
from ..utils.error_format import escape_markup


@click.group(invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context):
    """Show or change finder settings."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@config.command("show")
def config_show():
    """Show effective finder settings (user < project < local)."""
    settings = create_settings_manager().get_finder_settings()

    table = Table(title="Finder Settings", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="green")
    table.add_column("Value", style="yellow")
    for key, value in settings.model_dump().items():
        table.add_row(key, escape_markup(value))
    console.print(table)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--local", "scope_flag", flag_value="local", help="Set locally (just you)")
@click.option("--project", "scope_flag", flag_value="project", help="Set for project (team)")
@click.option("--global", "scope_flag", flag_value="user", help="Set globally (all projects)")
def config_set(key: str, value: str, scope_flag: str | None):
    """Set a finder setting.

    Without scope: Sets for the project (.node-finder/settings.yaml)

    Examples:
      node-finder config set default_extension .mjs
      node-finder config set modules_dir vendor --local
    """
    scope = scope_flag or "project"
    try:
        create_settings_manager().set_value(key, value, scope)  # type: ignore[arg-type]
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape_markup(e)}")
        sys.exit(1)

    console.print(f"[green]✓ Set {key} = {escape_markup(value)} ({scope})[/green]")
