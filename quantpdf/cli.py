"""Command-line interface for quantpdf using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click
from quantpdf import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """quantpdf: quantize density sums into range coder frequency tables."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from quantpdf.commands.table import table  # noqa: E402
from quantpdf.commands.roundtrip import roundtrip  # noqa: E402

cli.add_command(table)
cli.add_command(roundtrip)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
