"""Shabbat Window Calculator.

Computes weekly Shabbat windows (candle-lighting to Havdalah) from
astronomical sunset, decides whether an instant falls inside one, and
formats countdowns and clock times for display.
"""

__version__ = "0.1.0"

from shabbat_window.calculator import (
    CANDLE_LIGHTING_MINUTES,
    HAVDALAH_MINUTES,
    ShabbatStatus,
    ShabbatTimes,
    compute_window,
    get_status,
    is_within_window,
    upcoming_windows,
)
from shabbat_window.formatting import format_clock_time, format_duration
from shabbat_window.location import InvalidLocationError, Location
from shabbat_window.lock import LockState, lock_state
from shabbat_window.sun import PvlibSunsetProvider, SunsetProvider

__all__ = [
    "CANDLE_LIGHTING_MINUTES",
    "HAVDALAH_MINUTES",
    "InvalidLocationError",
    "Location",
    "LockState",
    "PvlibSunsetProvider",
    "ShabbatStatus",
    "ShabbatTimes",
    "SunsetProvider",
    "compute_window",
    "format_clock_time",
    "format_duration",
    "get_cli_app",
    "get_status",
    "is_within_window",
    "lock_state",
    "upcoming_windows",
]


# Lazy import of CLI app for programmatic access
def get_cli_app() -> "Typer":
    """Get the Typer CLI app for programmatic access.

    Returns:
        typer.Typer: The main CLI application
    """
    from shabbat_window.cli import app
    return app


# Type hint for lazy import
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from typer import Typer
