# ABOUTME: CLI package for Gihon, built on Click.
# ABOUTME: Defines the root command group, logging verbosity, and registers subcommands.

import logging

import click

from gihon.cli.commands import (
    add_cmd,
    config_cmd,
    cover_cmd,
    edit_cmd,
    info_cmd,
    inspect_cmd,
    ls_cmd,
    page_cmd,
    rm_cmd,
)

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


@click.group()
@click.version_option(package_name="gihon")
@click.option(
    "-v", "--verbose",
    count=True,
    help="Increase log output (-v for info, -vv for debug).",
)
def cli(verbose: int) -> None:
    """Gihon - a local comic book library manager."""
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbose, logging.DEBUG),
        format="%(levelname)s: %(message)s",
    )


cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(info_cmd.info)
cli.add_command(inspect_cmd.inspect)
cli.add_command(cover_cmd.cover)
cli.add_command(page_cmd.page)
cli.add_command(rm_cmd.rm)
cli.add_command(edit_cmd.edit)
cli.add_command(config_cmd.config)
