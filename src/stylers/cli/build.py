"""CLI command: stylers build -- collect scoped css from a source tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylers.build import DEFAULT_PATTERN, BuildParams
from stylers.build import build as run_build
from stylers.errors import BuildConfigError, HostSyntaxError


@click.command()
@click.option(
    "--output-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File to write the collected css to [default: target/stylers_out.css]",
)
@click.option(
    "--search-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory searched for Python sources [default: src]",
)
@click.option(
    "--pattern",
    default=DEFAULT_PATTERN,
    show_default=True,
    help="Glob of source files, relative to the search dir",
)
def build(output_path: Path | None, search_dir: Path | None, pattern: str) -> None:
    """Collect scoped css from every style() and style_sheet() call.

    Exits with code 1 on bad paths, on a source file that is not valid
    Python, or when any style block fails to parse.
    """
    try:
        builder = BuildParams.builder().with_pattern(pattern)
        if output_path is not None:
            builder = builder.with_output_path(output_path)
        if search_dir is not None:
            builder = builder.with_search_dir(search_dir)
        params = builder.finish()
    except BuildConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    try:
        report = run_build(params)
    except HostSyntaxError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Files read:       {report.files_read}")
    click.echo(f"Style blocks:     {report.macros_processed}")
    click.echo(f"Output:           {report.output_path}")

    if not report.ok:
        click.echo()
        for failure in report.failures:
            click.echo(f"  {failure}", err=True)
        click.echo(f"{report.blocks_failed} style block(s) failed", err=True)
        sys.exit(1)
