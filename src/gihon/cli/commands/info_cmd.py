# ABOUTME: The `gihon info` command for displaying a stored comic's details.
# ABOUTME: Shows metadata, page count, and cover status for a title in the library.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gihon.cli.options import config_option, library_option, open_store
from gihon.errors import GihonError

console = Console()


@click.command("info")
@click.argument("name")
@library_option
@config_option
def info(name: str, library_path: Path | None, config_path: Path | None) -> None:
    """Show metadata for a comic in the library by file name."""
    try:
        store = open_store(library_path, config_path)
        meta = store.get_metadata(name)
        pages = store.page_count(name)
        has_cover = store.get_cover_image(name) is not None
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")

    table.add_row("File", escape(name))
    table.add_row("Title", escape(meta.title) or "[dim]none[/dim]")
    table.add_row("Series", escape(meta.series) or "[dim]none[/dim]")
    table.add_row("Writer", escape(meta.writer) or "[dim]unknown[/dim]")
    table.add_row("Year", escape(meta.year) or "?")
    if meta.summary:
        table.add_row("Summary", escape(meta.summary))
    table.add_row("Pages", str(pages))
    table.add_row("Cover", "yes" if has_cover else "no")
    table.add_row("Location", escape(str(store.resolve_full_path(name))))

    console.print(table)
