"""Lookup commands: project root, installed modules and specifier resolution."""

from __future__ import annotations

import os
import sys
from typing import NoReturn

import click
from rich.table import Table

from ..console import console
from ..console import err_console
from ..finder import FinderError
from ..paths import create_finder
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message

from_option = click.option(
    "--from",
    "start_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="File that started loading (default: the current directory)",
)


def _fail(e: BaseException) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}")
    sys.exit(1)


@click.command("root")
@from_option
def root_cmd(start_file: str | None):
    """Show the project root (closest directory with a package descriptor)."""
    finder = create_finder(start_file)
    try:
        root = finder.find_root()
    except (FinderError, OSError, ValueError) as e:
        _fail(e)

    console.print(escape_markup(root), highlight=False, soft_wrap=True)


@click.command("modules")
@from_option
@click.option("--start", "start_dir", type=click.Path(file_okay=False), help="Directory to list from (default: project root)")
@click.option("--paths", "show_paths", is_flag=True, help="Show the real path of each module")
def modules_cmd(start_file: str | None, start_dir: str | None, show_paths: bool):
    """List installed modules visible from the project root.

    Closer dependency folders shadow farther ones; hidden entries are skipped.
    """
    finder = create_finder(start_file)
    try:
        modules = finder.list_module_paths(os.path.abspath(start_dir) if start_dir else None)
    except (FinderError, OSError, ValueError) as e:
        _fail(e)

    if not modules:
        console.print("[dim]No modules installed[/dim]")
        return

    if not show_paths:
        for name in modules:
            console.print(escape_markup(name), highlight=False, soft_wrap=True)
        return

    table = Table(title="Installed Modules", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="green")
    table.add_column("Path", style="magenta")
    for name, real_path in modules.items():
        table.add_row(escape_markup(name), escape_markup(real_path))
    console.print(table)


@click.command("find")
@click.argument("base_dir", type=click.Path(file_okay=False))
@click.argument("specifier")
def find_cmd(base_dir: str, specifier: str):
    """Resolve SPECIFIER relative to BASE_DIR (tries the default extension too).

    Examples:
      node-finder find . package.json
      node-finder find lib index
    """
    finder = create_finder()
    try:
        entry = finder.find(base_dir, specifier)
    except OSError as e:
        _fail(e)

    if entry is None:
        err_console.print(f"[yellow]Not found:[/yellow] {escape_markup(specifier)} in {escape_markup(base_dir)}")
        sys.exit(1)

    kind = "directory" if entry.directory else "file"
    console.print(f"{escape_markup(entry.filename)} [dim]({kind})[/dim]", highlight=False, soft_wrap=True)
