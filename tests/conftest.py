"""Shared fixtures: deterministic sunset providers."""

from datetime import date

import pandas as pd
import pytest

from shabbat_window.location import InvalidLocationError, Location
from shabbat_window.sun import SunsetProvider


class FixedSunsetProvider(SunsetProvider):
    """Sunset at a fixed local wall-clock time every day."""

    def __init__(self, hour: int = 17, minute: int = 0, drift_minutes: int = 0) -> None:
        self.hour = hour
        self.minute = minute
        self.drift_minutes = drift_minutes
        self.calls: list[date] = []

    def sunset(self, day: date, location: Location) -> pd.Timestamp:
        self.calls.append(day)
        # Saturdays drift later by drift_minutes to mimic seasonal change
        extra = self.drift_minutes if day.weekday() == 5 else 0
        return pd.Timestamp(
            day.year, day.month, day.day, self.hour, self.minute
        ).tz_localize(location.timezone) + pd.Timedelta(minutes=extra)


class PolarSunsetProvider(SunsetProvider):
    """Provider for which the sun never sets."""

    def sunset(self, day: date, location: Location) -> pd.Timestamp:
        raise InvalidLocationError(f"No sunset at {location.label} on {day}")


class BrokenSunsetProvider(SunsetProvider):
    """Provider that fails with an unexpected error."""

    def sunset(self, day: date, location: Location) -> pd.Timestamp:
        raise RuntimeError("ephemeris unavailable")


@pytest.fixture
def tel_aviv() -> Location:
    return Location.tel_aviv()


@pytest.fixture
def fixed_provider() -> FixedSunsetProvider:
    """Sunset at 17:00 local every day."""
    return FixedSunsetProvider()


@pytest.fixture
def drifting_provider() -> FixedSunsetProvider:
    """Sunset at 17:00 local, Saturdays one minute later."""
    return FixedSunsetProvider(drift_minutes=1)


@pytest.fixture
def polar_provider() -> PolarSunsetProvider:
    return PolarSunsetProvider()


@pytest.fixture
def broken_provider() -> BrokenSunsetProvider:
    return BrokenSunsetProvider()


@pytest.fixture
def late_provider() -> FixedSunsetProvider:
    """Sunset at 23:30 local, so Havdalah falls after Saturday midnight."""
    return FixedSunsetProvider(hour=23, minute=30)
