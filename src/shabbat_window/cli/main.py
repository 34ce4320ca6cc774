"""Main CLI application for the Shabbat window calculator."""

import logging
from typing import Annotated, Optional

import typer

from shabbat_window import __version__
from shabbat_window.cli import config as config_app
from shabbat_window.cli import shabbat
from shabbat_window.cli import web as web_app
from shabbat_window.cli.utils import console

# Create main app
app = typer.Typer(
    name="shabbat-window",
    help="Shabbat Window Calculator CLI",
    no_args_is_help=True,
)

# Top-level commands
app.command()(shabbat.status)
app.command()(shabbat.times)
app.command()(shabbat.lock)

# Register subcommand apps
app.add_typer(config_app.app, name="config")
app.add_typer(web_app.app, name="web")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"shabbat-window version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """Shabbat Window Calculator.

    Computes candle-lighting and Havdalah times from astronomical sunset
    and reports whether the app should be locked for Shabbat.

    Commands:
      status    Current Shabbat status
      times     Upcoming candle-lighting and Havdalah times
      lock      App lock decision
      config    Configuration management
      web       JSON API server

    Examples:
      shabbat-window status --location jerusalem
      shabbat-window times --weeks 8
      shabbat-window lock --at 2025-01-11T12:00
      shabbat-window config template -o settings.yaml
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


if __name__ == "__main__":
    app()
