"""Command line entry points for journalcorr."""

import logging

import typer
from typer import Typer

from .analyze import analyze_app
from ..configuration.cli import config_app


cli = Typer(help="Journal event correlation tools")
cli.add_typer(analyze_app, name="analyze")
cli.add_typer(config_app, name="config")


@cli.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Find which journal events correlate with the outcome flag."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


__all__ = ["cli", "analyze_app", "config_app"]
