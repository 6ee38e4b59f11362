# ABOUTME: The `gihon inspect` command for viewing a comic archive's ComicInfo.
# ABOUTME: Reads any archive on disk directly, without adding it to the library.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gihon.errors import GihonError
from gihon.formats.cbz import extract_cover_image, page_count, read_comic_metadata

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(path: Path) -> None:
    """Show metadata extracted from a comic archive."""
    try:
        meta = read_comic_metadata(path)
        pages = page_count(path)
        cover = extract_cover_image(path)
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    table = Table(title=escape(path.name), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", escape(meta.title) or "[dim]none[/dim]")
    table.add_row("Series", escape(meta.series) or "[dim]none[/dim]")
    table.add_row("Writer", escape(meta.writer) or "[dim]unknown[/dim]")
    table.add_row("Summary", escape(meta.summary) or "[dim]none[/dim]")
    table.add_row("Year", escape(meta.year) or "[dim]unknown[/dim]")
    table.add_row("Pages", str(pages))
    table.add_row("Cover", "yes" if cover is not None else "no")

    console.print(table)
