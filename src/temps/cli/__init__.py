"""Command line entry points for temps."""

import logging

import typer
from typer import Typer

from ..configuration.cli import config_app
from .expressions import languages_command, parse_command, resolve_command


cli = Typer(help="Parse and resolve human-readable time expressions")
cli.add_typer(config_app, name="config")
cli.command("parse")(parse_command)
cli.command("resolve")(resolve_command)
cli.command("languages")(languages_command)


@cli.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """temps command line tools."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


__all__ = ["cli", "config_app"]
