"""Configuration management commands."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.syntax import Syntax
from rich.table import Table

from shabbat_window.cli.utils import (
    console,
    handle_errors,
    print_success,
)
from shabbat_window.config import load_settings
from shabbat_window.location import LOCATION_PRESETS

app = typer.Typer(help="Configuration management commands")


SETTINGS_TEMPLATE = """\
# Shabbat window settings
# All fields are optional - defaults will be used if not specified

# Location Shabbat times are computed for (defaults to Tel Aviv)
# Either name a preset:
#   location:
#     preset: jerusalem
# or give coordinates:
location:
  latitude: 32.0853
  longitude: 34.7818
  timezone: Asia/Jerusalem
  elevation: 0.0
  name: Tel Aviv
  country_code: IL

# Message shown while the app is locked
lock:
  message: "The app is currently unavailable during Shabbat. Please try again after Havdalah."

# How often callers should recompute the status
refresh_interval_seconds: 60
"""


@app.command()
@handle_errors
def show(
    config_file: Annotated[
        Path,
        typer.Argument(
            help="Path to settings file to display",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Display a settings file and the values parsed from it."""
    settings = load_settings(config_file)

    content = config_file.read_text()
    lexer = "json" if config_file.suffix.lower() == ".json" else "yaml"
    console.print(f"\n[bold]Configuration:[/bold] {config_file}\n")
    console.print(Syntax(content, lexer, theme="monokai", line_numbers=True))

    console.print("\n[bold]Parsed Settings:[/bold]")
    table = Table()
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    location = settings.location
    table.add_row("location.name", location.label)
    table.add_row("location.latitude", f"{location.latitude:.4f}")
    table.add_row("location.longitude", f"{location.longitude:.4f}")
    table.add_row("location.timezone", location.timezone)
    table.add_row("location.elevation", f"{location.elevation:.0f}")
    table.add_row("lock.message", settings.lock_message)
    table.add_row("refresh_interval_seconds", str(settings.refresh_interval_seconds))
    console.print(table)


@app.command()
@handle_errors
def validate(
    config_file: Annotated[
        Path,
        typer.Argument(
            help="Path to settings file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Check that a settings file parses into valid settings."""
    settings = load_settings(config_file)
    print_success(f"Valid settings for {settings.location.label}")


@app.command()
@handle_errors
def template(
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output", "-o",
            help="Output file path (prints to stdout if not specified)",
        ),
    ] = None,
) -> None:
    """Generate a template settings file."""
    if output is not None:
        output.write_text(SETTINGS_TEMPLATE)
        print_success(f"Template written to {output}")
    else:
        console.print(Syntax(SETTINGS_TEMPLATE, "yaml", theme="monokai"))


@app.command()
@handle_errors
def locations() -> None:
    """List built-in location presets and the custom location format."""
    console.print("\n[bold]Built-in Locations[/bold]\n")

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Latitude")
    table.add_column("Longitude")
    table.add_column("Timezone")
    table.add_column("Elevation (m)")

    for key, location in LOCATION_PRESETS.items():
        table.add_row(
            key,
            f"{location.latitude:.4f}",
            f"{location.longitude:.4f}",
            location.timezone,
            f"{location.elevation:.0f}",
        )

    console.print(table)

    console.print("\n[bold]Custom Location Format[/bold]\n")
    console.print("  [cyan]--location 'lat,lon'[/cyan]  (timezone Asia/Jerusalem)")
    console.print("  [cyan]--location 'lat,lon,timezone'[/cyan]")
    console.print("  Example: --location '40.71,-74.01,America/New_York'\n")
