# ABOUTME: The `gihon edit` command for changing a stored comic's metadata.
# ABOUTME: Updates the given fields and rewrites the title's metadata.json.

from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from gihon.cli.options import config_option, library_option, open_store
from gihon.errors import GihonError, NotFoundError
from gihon.library.store import LibraryStore
from gihon.metadata import ComicMetadata

console = Console()


def _current_metadata(store: LibraryStore, name: str) -> ComicMetadata:
    """Metadata to apply the edits to; blank for a stored archive without a descriptor."""
    try:
        return store.get_metadata(name)
    except NotFoundError:
        if not store.resolve_full_path(name).is_file():
            raise
        return ComicMetadata()


@click.command()
@click.argument("name")
@click.option("--title", default=None, help="New title.")
@click.option("--series", default=None, help="New series name.")
@click.option("--writer", default=None, help="New writer.")
@click.option("--summary", default=None, help="New summary.")
@click.option("--year", default=None, help="New publication year.")
@library_option
@config_option
def edit(
    name: str,
    title: str | None,
    series: str | None,
    writer: str | None,
    summary: str | None,
    year: str | None,
    library_path: Path | None,
    config_path: Path | None,
) -> None:
    """Edit metadata fields of a comic in the library."""
    changes = {
        key: value
        for key, value in {
            "title": title,
            "series": series,
            "writer": writer,
            "summary": summary,
            "year": year,
        }.items()
        if value is not None
    }
    if not changes:
        console.print("[yellow]Nothing to change.[/yellow]")
        return

    try:
        store = open_store(library_path, config_path)
        current = _current_metadata(store, name)
        store.edit_metadata(name, replace(current, **changes))
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    fields = ", ".join(sorted(changes))
    console.print(f"[green]Updated[/green] {escape(name)}: {fields}")
