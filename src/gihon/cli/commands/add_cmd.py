# ABOUTME: The `gihon add` command for copying comic archives into the library.
# ABOUTME: Accepts a single archive or a directory to scan, and reports what was added.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from gihon.cli.options import config_option, library_option, open_store
from gihon.core.importer import find_archives, import_comics
from gihon.errors import GihonError

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@library_option
@config_option
def add(path: Path, library_path: Path | None, config_path: Path | None) -> None:
    """Add a comic archive, or every archive in a directory, to the library."""
    try:
        store = open_store(library_path, config_path)
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if path.is_file():
        try:
            stored = store.ingest(path)
        except GihonError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise SystemExit(1) from exc
        console.print(f"[green]Added[/green] {escape(stored.name)}")
        return

    archives = find_archives(path)
    if not archives:
        console.print(f"[yellow]No comic archives found in {escape(str(path))}[/yellow]")
        return

    console.print(f"Found [bold]{len(archives)}[/bold] archive(s)\n")

    result = import_comics(archives, store)
    for stored in result.added_paths:
        console.print(f"  [green]Added[/green] {escape(stored.name)}")

    parts = []
    if result.added:
        parts.append(f"[green]{result.added} added[/green]")
    if result.errors:
        parts.append(f"[red]{result.errors} error(s)[/red]")
    console.print(", ".join(parts))

    if result.error_details:
        console.print(
            f"\n[yellow]{result.errors} file(s) could not be added:[/yellow]"
        )
        for failed, msg in result.error_details:
            console.print(f"  [dim]{escape(failed.name)}:[/dim] {escape(msg)}")
