"""Shabbat window calculation.

A Shabbat window runs from candle-lighting (a fixed offset before Friday
sunset) to Havdalah (a fixed offset after Saturday sunset), both bounds
inclusive. All functions here are pure: they take the instant and location
as arguments and return fresh immutable values.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

import pandas as pd

from shabbat_window.location import Location
from shabbat_window.sun import PvlibSunsetProvider, SunsetProvider

logger = logging.getLogger(__name__)

CANDLE_LIGHTING_MINUTES = 18
HAVDALAH_MINUTES = 42

FRIDAY = 4
SATURDAY = 5

ONE_WEEK = pd.Timedelta(days=7)
ONE_MINUTE = pd.Timedelta(minutes=1)

Instant = Union[datetime, pd.Timestamp, str]

_DEFAULT_PROVIDER = PvlibSunsetProvider()


@dataclass(frozen=True)
class ShabbatTimes:
    """Boundaries of one weekly Shabbat window.

    Attributes:
        candle_lighting: Start of the window, before Friday sunset
        havdalah: End of the window, after Saturday sunset
    """

    candle_lighting: pd.Timestamp
    havdalah: pd.Timestamp

    def __post_init__(self) -> None:
        """Validate window ordering."""
        if self.havdalah <= self.candle_lighting:
            raise ValueError(
                f"Havdalah ({self.havdalah}) must be after "
                f"candle-lighting ({self.candle_lighting})"
            )

    @property
    def duration(self) -> pd.Timedelta:
        """Length of the window."""
        return self.havdalah - self.candle_lighting

    def contains(self, instant: pd.Timestamp) -> bool:
        """Check whether an instant lies inside the window, bounds included."""
        return self.candle_lighting <= instant <= self.havdalah


@dataclass(frozen=True)
class ShabbatStatus:
    """Snapshot of the Shabbat state at one instant.

    Exactly one of next_shabbat_start / shabbat_end is set, and the
    matching minutes field alongside it.

    Attributes:
        is_shabbat: Whether current_time lies inside a window
        current_time: The instant the status was computed for
        next_shabbat_start: Upcoming candle-lighting (only outside a window)
        shabbat_end: Havdalah of the current window (only inside a window)
        minutes_until_start: Whole minutes until next_shabbat_start
        minutes_until_end: Whole minutes until shabbat_end
    """

    is_shabbat: bool
    current_time: pd.Timestamp
    next_shabbat_start: Optional[pd.Timestamp] = None
    shabbat_end: Optional[pd.Timestamp] = None
    minutes_until_start: Optional[int] = None
    minutes_until_end: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate that start and end fields are mutually exclusive."""
        if (self.next_shabbat_start is None) == (self.shabbat_end is None):
            raise ValueError(
                "Exactly one of next_shabbat_start and shabbat_end must be set"
            )
        if (self.minutes_until_start is None) == (self.minutes_until_end is None):
            raise ValueError(
                "Exactly one of minutes_until_start and minutes_until_end must be set"
            )
        if self.is_shabbat != (self.shabbat_end is not None):
            raise ValueError("shabbat_end must be set exactly when is_shabbat is True")
        for minutes in (self.minutes_until_start, self.minutes_until_end):
            if minutes is not None and minutes < 0:
                raise ValueError(f"Minutes must be non-negative, got {minutes}")


def to_local(instant: Instant, location: Location) -> pd.Timestamp:
    """Convert an instant to a timestamp in the location's timezone.

    Naive values are taken as wall-clock time at the location.
    """
    ts = pd.Timestamp(instant)
    if ts.tzinfo is None:
        return ts.tz_localize(
            location.timezone, ambiguous=True, nonexistent="shift_forward"
        )
    return ts.tz_convert(location.timezone)


def anchor_friday(day: date) -> date:
    """Return the Friday that a calendar date belongs to.

    Friday maps to itself, Saturday to the day before, and every other
    weekday forward to the coming Friday.
    """
    weekday = day.weekday()
    if weekday == SATURDAY:
        return day - timedelta(days=1)
    return day + timedelta(days=(FRIDAY - weekday) % 7)


def window_for_friday(
    friday: date,
    location: Location,
    provider: Optional[SunsetProvider] = None,
) -> ShabbatTimes:
    """Compute the window that starts on the given Friday."""
    provider = provider or _DEFAULT_PROVIDER
    friday_sunset = provider.sunset(friday, location)
    saturday_sunset = provider.sunset(friday + timedelta(days=1), location)
    times = ShabbatTimes(
        candle_lighting=friday_sunset - pd.Timedelta(minutes=CANDLE_LIGHTING_MINUTES),
        havdalah=saturday_sunset + pd.Timedelta(minutes=HAVDALAH_MINUTES),
    )
    logger.debug(
        "Shabbat window for %s at %s: %s - %s",
        friday, location.label, times.candle_lighting, times.havdalah,
    )
    return times


def compute_window(
    instant: Instant,
    location: Location,
    provider: Optional[SunsetProvider] = None,
) -> ShabbatTimes:
    """Compute the Shabbat window for the week containing an instant.

    The week is resolved in the location's local time: a Saturday instant
    belongs to the window that started the previous evening.

    Args:
        instant: Any point in time
        location: Where to compute sunset
        provider: Sunset source (defaults to pvlib SPA)

    Returns:
        ShabbatTimes for that week

    Raises:
        InvalidLocationError: If sunset is undefined at the location
    """
    local = to_local(instant, location)
    return window_for_friday(anchor_friday(local.date()), location, provider)


def _containing_window(
    local: pd.Timestamp,
    location: Location,
    provider: Optional[SunsetProvider],
) -> Optional[ShabbatTimes]:
    # Check the instant's own week first, then the week before.
    for reference in (local, local - ONE_WEEK):
        times = compute_window(reference, location, provider)
        if times.contains(local):
            return times
    return None


def is_within_window(
    instant: Instant,
    location: Location,
    provider: Optional[SunsetProvider] = None,
) -> bool:
    """Check whether an instant falls inside a Shabbat window.

    Both the window for the instant's own week and the window for one
    week earlier are checked. Bounds are inclusive.
    """
    local = to_local(instant, location)
    return _containing_window(local, location, provider) is not None


def get_status(
    instant: Optional[Instant] = None,
    location: Optional[Location] = None,
    provider: Optional[SunsetProvider] = None,
) -> ShabbatStatus:
    """Compute the Shabbat status at an instant.

    Args:
        instant: Point in time to evaluate (defaults to now)
        location: Where to evaluate (defaults to Tel Aviv)
        provider: Sunset source (defaults to pvlib SPA)

    Returns:
        ShabbatStatus snapshot
    """
    location = location or Location.tel_aviv()
    if instant is None:
        local = pd.Timestamp.now(tz=location.timezone)
    else:
        local = to_local(instant, location)

    window = _containing_window(local, location, provider)
    if window is not None:
        return ShabbatStatus(
            is_shabbat=True,
            current_time=local,
            shabbat_end=window.havdalah,
            minutes_until_end=max(0, int((window.havdalah - local) // ONE_MINUTE)),
        )

    friday = anchor_friday(local.date())
    upcoming = window_for_friday(friday, location, provider)
    if upcoming.havdalah < local:
        # Saturday night after Havdalah: the next window is a week away.
        upcoming = window_for_friday(friday + timedelta(days=7), location, provider)

    return ShabbatStatus(
        is_shabbat=False,
        current_time=local,
        next_shabbat_start=upcoming.candle_lighting,
        minutes_until_start=max(
            0, int((upcoming.candle_lighting - local) // ONE_MINUTE)
        ),
    )


def upcoming_windows(
    start: Instant,
    location: Location,
    count: int = 4,
    provider: Optional[SunsetProvider] = None,
) -> list[ShabbatTimes]:
    """List the next Shabbat windows that have not closed by a start instant.

    A window in progress at start is included first.

    Args:
        start: Instant to list windows from
        location: Where to compute sunset
        count: Number of windows to return (at least 1)
        provider: Sunset source (defaults to pvlib SPA)

    Returns:
        Windows in chronological order

    Raises:
        ValueError: If count is less than 1
    """
    if count < 1:
        raise ValueError(f"Window count must be at least 1, got {count}")

    local = to_local(start, location)
    # Havdalah can fall after Saturday midnight, so last week's window may still be open.
    friday = anchor_friday(local.date()) - timedelta(days=7)
    windows: list[ShabbatTimes] = []
    while len(windows) < count:
        times = window_for_friday(friday, location, provider)
        if times.havdalah >= local:
            windows.append(times)
        friday += timedelta(days=7)
    return windows
