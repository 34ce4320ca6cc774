"""Shabbat status, times, and lock commands."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from shabbat_window.calculator import get_status, upcoming_windows
from shabbat_window.cli.utils import (
    console,
    create_status_table,
    create_windows_table,
    handle_errors,
    parse_instant,
    print_success,
    print_warning,
    resolve_settings,
)
from shabbat_window.lock import lock_state

LocationOption = Annotated[
    Optional[str],
    typer.Option(
        "--location", "-l",
        help="Preset name (tel-aviv, jerusalem, ...) or 'lat,lon[,timezone]'",
    ),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config", "-c",
        help="Settings file (.yaml, .yml or .json)",
        exists=True,
        dir_okay=False,
    ),
]
AtOption = Annotated[
    Optional[str],
    typer.Option(
        "--at",
        help="ISO 8601 date/time to evaluate (default: now, local to the location)",
    ),
]


@handle_errors
def status(
    location: LocationOption = None,
    at: AtOption = None,
    config: ConfigOption = None,
) -> None:
    """Show whether it is currently Shabbat and the time until it starts or ends.

    Examples:
      shabbat-window status
      shabbat-window status --location jerusalem
      shabbat-window status --at 2025-01-10T18:00
    """
    settings = resolve_settings(config, location)
    instant = parse_instant(at, settings.location)

    result = get_status(instant, settings.location)
    console.print(create_status_table(result, settings.location))


@handle_errors
def times(
    location: LocationOption = None,
    start: Annotated[
        Optional[str],
        typer.Option(
            "--from",
            help="ISO 8601 date/time to list windows from (default: now)",
        ),
    ] = None,
    weeks: Annotated[
        int,
        typer.Option(
            "--weeks", "-w",
            help="Number of weekly windows to list",
            min=1,
            max=52,
        ),
    ] = 4,
    config: ConfigOption = None,
) -> None:
    """List upcoming candle-lighting and Havdalah times.

    Examples:
      shabbat-window times
      shabbat-window times --weeks 8 --location new-york
    """
    settings = resolve_settings(config, location)
    instant = parse_instant(start, settings.location)

    windows = upcoming_windows(instant, settings.location, count=weeks)
    console.print(create_windows_table(windows, settings.location))


@handle_errors
def lock(
    location: LocationOption = None,
    at: AtOption = None,
    config: ConfigOption = None,
) -> None:
    """Show whether the app should be locked for Shabbat.

    Examples:
      shabbat-window lock
      shabbat-window lock --at 2025-01-11T12:00
    """
    settings = resolve_settings(config, location)
    instant = parse_instant(at, settings.location)

    state = lock_state(instant, settings.location, message=settings.lock_message)
    if state.error:
        print_warning(f"{state.error}; app stays unlocked")
    elif state.is_locked:
        console.print(f"[bold red]Locked[/bold red] until {state.unlock_time}")
        console.print(state.lock_message)
    else:
        print_success("Unlocked")
