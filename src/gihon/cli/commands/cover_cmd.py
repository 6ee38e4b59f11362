# ABOUTME: The `gihon cover` command for fetching a stored comic's cover image.
# ABOUTME: Prints the cover as a data URI or writes the decoded image to a file.

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
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the image to this file instead of printing a data URI.",
)
@library_option
@config_option
def cover(
    name: str,
    output: Path | None,
    library_path: Path | None,
    config_path: Path | None,
) -> None:
    """Show the stored cover image for a comic."""
    try:
        store = open_store(library_path, config_path)
        uri = store.get_cover_image(name)
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if uri is None:
        console.print(f"[yellow]No cover stored for {escape(name)}[/yellow]")
        raise SystemExit(1)

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
