"""Command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from appdata_releases import __version__
from appdata_releases.cli.commands.convert import STDIO, run_convert

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    help="Convert a changelog into an appdata [bold]<releases>[/] XML block.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def main(
    input_path: str = typer.Argument(
        STDIO,
        metavar="INPUT",
        help="Changelog file to read ('-' for standard input)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write XML to this file instead of standard output",
        dir_okay=False,
    ),
    base_level: int | None = typer.Option(
        None,
        "--base-level",
        min=0,
        help="Indentation levels added to every line (1 to embed in <component>)",
    ),
    indent_width: int | None = typer.Option(
        None,
        "--indent-width",
        min=0,
        help="Spaces per nesting level",
    ),
    strict_dates: bool = typer.Option(
        False,
        "--strict-dates",
        help="Fail instead of writing a placeholder for unparseable dates",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="pyproject.toml to read [tool.appdata-releases] from",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Read a changelog and print its releases as appdata XML."""
    _configure_logging(verbose)
    run_convert(
        input_path=input_path,
        output_path=output,
        config_path=config,
        base_level=base_level,
        indent_width=indent_width,
        strict_dates=strict_dates,
        err_console=Console(stderr=True),
    )
