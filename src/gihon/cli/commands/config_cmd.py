# ABOUTME: The `gihon config` command group for viewing and changing settings.
# ABOUTME: Reads and writes config.json through ConfigManager.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from gihon.cli.options import config_option
from gihon.config import DEFAULT_LIBRARY_ROOT, ConfigManager
from gihon.errors import GihonError

console = Console()


@click.group()
def config() -> None:
    """View or change Gihon settings."""


@config.command("show")
@config_option
def show(config_path: Path | None) -> None:
    """Show the current settings."""
    manager = ConfigManager(config_path)
    try:
        settings = manager.load()
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    library = settings.library_root or f"{DEFAULT_LIBRARY_ROOT} (default)"
    console.print(f"[bold]Config file:[/bold] {escape(str(manager.config_path))}")
    console.print(f"[bold]Library:[/bold] {escape(library)}")


@config.command("set-library")
@click.argument("path", type=click.Path(file_okay=False, path_type=Path))
@config_option
def set_library(path: Path, config_path: Path | None) -> None:
    """Store PATH as the default library directory."""
    manager = ConfigManager(config_path)
    try:
        settings = manager.load()
        settings.library_root = str(path.expanduser().resolve())
        manager.save(settings)
    except GihonError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    console.print(f"[green]Library set to[/green] {escape(settings.library_root)}")
