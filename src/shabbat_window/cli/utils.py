"""Utility functions for the CLI."""

from functools import wraps
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import pandas as pd
import typer
from rich.console import Console
from rich.table import Table

from shabbat_window.calculator import ShabbatStatus, ShabbatTimes, to_local
from shabbat_window.config import ConfigurationError, Settings, load_settings
from shabbat_window.formatting import describe_status, format_clock_time, format_duration
from shabbat_window.location import Location, parse_location

console = Console()
error_console = Console(stderr=True)

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Decorator to handle common errors and display user-friendly messages."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            error_console.print(f"[red]Configuration error:[/red] {e}")
            raise typer.Exit(1) from e
        except FileNotFoundError as e:
            error_console.print(f"[red]File not found:[/red] {e}")
            raise typer.Exit(1) from e
        except ValueError as e:
            error_console.print(f"[red]Invalid value:[/red] {e}")
            raise typer.Exit(1) from e
        except KeyboardInterrupt:
            error_console.print("\n[yellow]Interrupted by user[/yellow]")
            raise typer.Exit(130) from None

    return wrapper  # type: ignore[return-value]


def resolve_settings(
    config_path: Optional[Path],
    location_str: Optional[str] = None,
) -> Settings:
    """Load settings from a config file and apply a location override."""
    settings = load_settings(config_path) if config_path is not None else Settings()
    if location_str is not None:
        settings = Settings(
            location=parse_location(location_str),
            lock_message=settings.lock_message,
            refresh_interval_seconds=settings.refresh_interval_seconds,
        )
    return settings


def parse_instant(value: Optional[str], location: Location) -> pd.Timestamp:
    """Parse an ISO 8601 instant, defaulting to now.

    Values without an offset are read as local time at the location.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if value is None:
        return pd.Timestamp.now(tz=location.timezone)
    try:
        return to_local(pd.Timestamp(value), location)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid date/time '{value}': {e}") from e


def create_status_table(status: ShabbatStatus, location: Location) -> Table:
    """Create a Rich table from a Shabbat status.

    Args:
        status: Status to display
        location: Location the status was computed for

    Returns:
        Rich Table object
    """
    display = describe_status(status, location)

    table = Table(title=f"Shabbat Status - {location.label}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right", style="green")

    table.add_row("Current Time", status.current_time.strftime("%a %Y-%m-%d %H:%M"))
    table.add_row("Shabbat", "[bold]yes[/bold]" if status.is_shabbat else "no")

    if status.is_shabbat:
        table.add_row("Ends At", f"{display.formatted_end_time}")
        table.add_row("Time Remaining", f"{display.formatted_time_until_end}")
    else:
        start_day = status.next_shabbat_start.strftime("%a %Y-%m-%d")
        table.add_row("Next Candle-Lighting", f"{start_day} {display.formatted_start_time}")
        table.add_row("Time Until Start", f"{display.formatted_time_until_start}")

    return table


def create_windows_table(windows: list[ShabbatTimes], location: Location) -> Table:
    """Create a Rich table listing Shabbat windows."""
    table = Table(title=f"Shabbat Times - {location.label}")
    table.add_column("Friday", style="cyan")
    table.add_column("Candle-Lighting", justify="right", style="green")
    table.add_column("Havdalah", justify="right", style="green")
    table.add_column("Duration", justify="right")

    for times in windows:
        minutes = int(times.duration.total_seconds() // 60)
        table.add_row(
            times.candle_lighting.strftime("%Y-%m-%d"),
            format_clock_time(times.candle_lighting, location),
            format_clock_time(times.havdalah, location),
            format_duration(minutes),
        )

    return table


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]{message}[/green]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]{message}[/yellow]")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]{message}[/blue]")
