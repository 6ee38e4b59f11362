# ABOUTME: The `gihon rm` command for removing a comic from the library.
# ABOUTME: Deletes the title folder with its archive, metadata, and cover.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from gihon.cli.options import config_option, library_option, open_store
from gihon.errors import GihonError

console = Console()


@click.command("rm")
@click.argument("name")
@click.option("-y", "--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@library_option
@config_option
def rm(name: str, yes: bool, library_path: Path | None, config_path: Path | None) -> None:
    """Remove a comic from the library by file name."""
    if not yes and not click.confirm(f"Remove {name} from the library?"):
        console.print("[yellow]Cancelled.[/yellow]")
        return

    try:
        store = open_store(library_path, config_path)
        store.delete_file(name)
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    console.print(f"[green]Removed[/green] {escape(name)}")
