"""Sunset providers.

The calculator never does solar geometry itself. It asks a SunsetProvider
for the sunset on a given local calendar date, which keeps the week
anchoring logic testable with a fixed-time fake provider.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date

import pandas as pd
from pvlib.location import Location as PVLibLocation

from shabbat_window.location import InvalidLocationError, Location

logger = logging.getLogger(__name__)


class SunsetProvider(ABC):
    """Abstract source of sunset instants."""

    @abstractmethod
    def sunset(self, day: date, location: Location) -> pd.Timestamp:
        """Return the sunset on a local calendar date.

        Args:
            day: Calendar date in the location's timezone
            location: Where to compute sunset

        Returns:
            Timezone-aware timestamp in the location's timezone

        Raises:
            InvalidLocationError: If the sun does not set on that date
        """
        pass


class PvlibSunsetProvider(SunsetProvider):
    """Sunset from pvlib's NREL SPA implementation.

    SPA rise/set times use the standard 0.8333° apparent horizon
    (refraction plus solar semi-diameter). pvlib evaluates events per UTC
    day, so the UTC days either side of the target are evaluated too and
    the sunset whose local date matches is returned. This keeps far-west
    longitudes, where local sunset is on the next UTC day, correct.
    """

    method: str = "spa"

    def sunset(self, day: date, location: Location) -> pd.Timestamp:
        site = PVLibLocation(
            latitude=location.latitude,
            longitude=location.longitude,
            tz=location.timezone,
            altitude=location.elevation,
            name=location.name or None,
        )
        midnight = pd.Timestamp(day.year, day.month, day.day)
        utc_days = pd.DatetimeIndex(
            [midnight + pd.Timedelta(days=offset) for offset in (-1, 0, 1)]
        ).tz_localize("UTC")

        events = site.get_sun_rise_set_transit(utc_days, method=self.method)

        for value in events["sunset"]:
            if pd.isna(value):
                continue
            local = pd.Timestamp(value).tz_convert(location.timezone)
            if local.date() == day:
                logger.debug("Sunset at %s on %s: %s", location.label, day, local)
                return local

        raise InvalidLocationError(
            f"Sunset is undefined at {location.label} on {day.isoformat()} "
            "(polar day or night)"
        )
