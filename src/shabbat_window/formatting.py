"""Display formatting for Shabbat status values."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd

from shabbat_window.calculator import ShabbatStatus
from shabbat_window.location import Location

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration(minutes: int) -> str:
    """Format a whole number of minutes as a short duration.

    Examples: 30 -> "30 minutes", 90 -> "1h 30m", 1500 -> "1d 1h".

    From one day up only days and hours are shown and leftover minutes
    are ignored, so 1441 -> "1 day" rather than "1d 0h".

    Raises:
        ValueError: If minutes is negative
    """
    if minutes < 0:
        raise ValueError(f"Duration must be non-negative, got {minutes} minutes")

    if minutes < MINUTES_PER_HOUR:
        return _plural(minutes, "minute")

    hours, remaining_minutes = divmod(minutes, MINUTES_PER_HOUR)
    if minutes < MINUTES_PER_DAY:
        if remaining_minutes == 0:
            return _plural(hours, "hour")
        return f"{hours}h {remaining_minutes}m"

    days, remaining_hours = divmod(hours, 24)
    # Leftover minutes are dropped at day scale.
    if remaining_hours == 0:
        return _plural(days, "day")
    return f"{days}d {remaining_hours}h"


def format_clock_time(instant: datetime, location: Optional[Location] = None) -> str:
    """Format an instant as 24-hour HH:MM.

    Aware instants are converted to the location's timezone when one is
    given; otherwise the instant's own wall-clock time is used.
    """
    ts = pd.Timestamp(instant)
    if location is not None and ts.tzinfo is not None:
        ts = ts.tz_convert(location.timezone)
    return ts.strftime("%H:%M")


@dataclass(frozen=True)
class StatusDisplay:
    """Display strings derived from a ShabbatStatus.

    Fields that do not apply to the status (e.g. the end time while
    Shabbat has not started) are None.
    """

    is_shabbat: bool
    formatted_time_until_start: Optional[str] = None
    formatted_time_until_end: Optional[str] = None
    formatted_start_time: Optional[str] = None
    formatted_end_time: Optional[str] = None


def describe_status(
    status: ShabbatStatus, location: Optional[Location] = None
) -> StatusDisplay:
    """Render a status into display strings."""
    return StatusDisplay(
        is_shabbat=status.is_shabbat,
        formatted_time_until_start=(
            format_duration(status.minutes_until_start)
            if status.minutes_until_start is not None else None
        ),
        formatted_time_until_end=(
            format_duration(status.minutes_until_end)
            if status.minutes_until_end is not None else None
        ),
        formatted_start_time=(
            format_clock_time(status.next_shabbat_start, location)
            if status.next_shabbat_start is not None else None
        ),
        formatted_end_time=(
            format_clock_time(status.shabbat_end, location)
            if status.shabbat_end is not None else None
        ),
    )
