# ABOUTME: The `gihon ls` command for listing comics in the library.
# ABOUTME: Displays a Rich table of stored archives with their stored metadata.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gihon.cli.options import config_option, library_option, open_store
from gihon.errors import GihonError

console = Console()


@click.command("ls")
@library_option
@config_option
def ls(library_path: Path | None, config_path: Path | None) -> None:
    """List all comics in the library."""
    try:
        store = open_store(library_path, config_path)
        titles = store.list_titles()
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if not titles:
        console.print("[yellow]No comics in the library.[/yellow]")
        return

    table = Table()
    table.add_column("File", style="bold")
    table.add_column("Title")
    table.add_column("Series")
    table.add_column("Year", width=6)

    for name in titles:
        try:
            meta = store.get_metadata(name)
        except GihonError:
            table.add_row(escape(name), "[dim]no metadata[/dim]", "", "")
            continue
        table.add_row(
            escape(name),
            escape(meta.display_title),
            escape(meta.series),
            escape(meta.year),
        )

    console.print(table)
    console.print(f"\n[dim]{len(titles)} comic(s)[/dim]")
