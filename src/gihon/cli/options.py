# ABOUTME: Shared Click options and helpers for Gihon CLI commands.
# ABOUTME: Provides the --library / --config flags and builds the LibraryStore they select.

from pathlib import Path

import click

from gihon.config import DEFAULT_CONFIG_PATH, DEFAULT_LIBRARY_ROOT, ConfigManager, resolve_library_root
from gihon.library.store import LibraryStore

library_option = click.option(
    "--library",
    "library_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="GIHON_LIBRARY",
    help=f"Library directory (default: config setting or {DEFAULT_LIBRARY_ROOT})",
)

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Path to config file (default: {DEFAULT_CONFIG_PATH})",
)


def open_store(library_path: Path | None, config_path: Path | None) -> LibraryStore:
    """Build the LibraryStore selected by the command-line flags and config file."""
    config = ConfigManager(config_path).load()
    return LibraryStore(resolve_library_root(library_path, config))
