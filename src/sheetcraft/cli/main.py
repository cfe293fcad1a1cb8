"""Sheetcraft CLI entry point: Click group with subcommands."""

import logging

import click

from sheetcraft import __version__


@click.group()
@click.version_option(version=__version__, prog_name="sheetcraft")
@click.option(
    "-v", "--verbose", is_flag=True,
    help="Log render summaries and missing-style warnings to stderr.",
)
def cli(verbose: bool) -> None:
    """Sheetcraft - compile declarative styles into one stylesheet."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
        logging.getLogger("sheetcraft").setLevel(logging.DEBUG)


# Import and register subcommands
from sheetcraft.cli.render import render  # noqa: E402
from sheetcraft.cli.validate import validate  # noqa: E402
from sheetcraft.cli.inspect import inspect  # noqa: E402

cli.add_command(render)
cli.add_command(validate)
cli.add_command(inspect)
