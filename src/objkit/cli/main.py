"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objkit - rectangles, JSON capability records and CSS selectors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from objkit.cli.area import area  # noqa: E402
from objkit.cli.normalize import normalize  # noqa: E402
from objkit.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(selector)
cli.add_command(normalize)
