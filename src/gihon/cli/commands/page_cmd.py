# ABOUTME: The `gihon page` command for fetching a single page of a stored comic.
# ABOUTME: Pages are numbered from 0 in the archive's sorted image order.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from gihon.cli.options import config_option, library_option, open_store
from gihon.errors import GihonError
from gihon.formats.datauri import decode_data_uri

console = Console()


@click.command()
@click.argument("name")
@click.argument("index", type=click.IntRange(min=0))
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the image to this file instead of printing a data URI.",
)
@library_option
@config_option
def page(
    name: str,
    index: int,
    output: Path | None,
    library_path: Path | None,
    config_path: Path | None,
) -> None:
    """Show page INDEX (0-based) of a comic as a data URI."""
    try:
        store = open_store(library_path, config_path)
        uri = store.load_page(name, index)
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if output is None:
        click.echo(uri)
        return

    _, data = decode_data_uri(uri)
    try:
        output.write_bytes(data)
    except OSError as exc:
        console.print(
            f"[red]Error:[/red] Failed to write {escape(str(output))}: {escape(str(exc))}"
        )
        raise SystemExit(1) from exc
    console.print(f"[green]Wrote[/green] {escape(str(output))}")
