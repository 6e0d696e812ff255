"""CLI command: stylers scope -- print the scoped css of one stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylers.class_name import Class
from stylers.errors import StylersError
from stylers.style import from_str


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--class",
    "class_name",
    default=None,
    help="Class to scope with instead of one derived from the file content",
)
def scope(stylesheet: str, class_name: str | None) -> None:
    """Scope a css file and print the result."""
    source = Path(stylesheet).read_text(encoding="utf-8")
    class_ = Class(class_name) if class_name else Class.from_seed(source)

    try:
        css = from_str(source, class_)
    except StylersError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(css)
