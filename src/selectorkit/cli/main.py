"""Selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Selectorkit - build, format and lint CSS selectors."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.check import check  # noqa: E402
from selectorkit.cli.format import format_selector  # noqa: E402

cli.add_command(format_selector)
cli.add_command(build)
cli.add_command(check)
