"""csscompress CLI entry point: Click group with subcommands."""

import logging

import click

from csscompress import __version__


@click.group()
@click.version_option(version=__version__, prog_name="csscompress")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """csscompress - normalize and minify CSS selectors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from csscompress.cli.selectors import selectors_command  # noqa: E402

cli.add_command(selectors_command)
