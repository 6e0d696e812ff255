"""Stylers CLI entry point: Click group with subcommands."""

import logging

import click

from stylers import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylers")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """Stylers - scoped CSS for component styles."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stylers.cli.build import build  # noqa: E402
from stylers.cli.scope import scope  # noqa: E402

cli.add_command(build)
cli.add_command(scope)
