"""Web API commands."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from shabbat_window.cli.utils import console, handle_errors, print_info

app = typer.Typer(help="Web API commands")


@app.command()
@handle_errors
def start(
    host: Annotated[
        str,
        typer.Option(
            "--host",
            help="Host address to bind the server to",
        ),
    ] = "127.0.0.1",
    port: Annotated[
        int,
        typer.Option(
            "--port", "-p",
            help="Port number to listen on",
        ),
    ] = 5000,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config", "-c",
            help="Settings file (.yaml, .yml or .json)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Enable debug mode",
        ),
    ] = False,
) -> None:
    """Start the Shabbat status JSON API server.

    Examples:
      shabbat-window web start
      shabbat-window web start --host 0.0.0.0 --port 8080
      shabbat-window web start --config settings.yaml
    """
    from shabbat_window.config import load_settings
    from shabbat_window.web import create_app

    settings = load_settings(config) if config is not None else None
    flask_app = create_app(settings=settings)

    print_info(f"Starting Shabbat API at http://{host}:{port}")
    console.print("  Press [bold]Ctrl+C[/bold] to stop the server.")

    flask_app.run(host=host, port=port, debug=debug)
