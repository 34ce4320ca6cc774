"""Geographic locations for Shabbat window calculations."""

from dataclasses import dataclass
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class InvalidLocationError(ValueError):
    """Raised when a location cannot be used to compute sunset times."""


@dataclass(frozen=True)
class Location:
    """Geographic location used for sunset calculations.

    Frozen dataclass ensures immutability and hashability.

    Attributes:
        latitude: Latitude in decimal degrees (positive = North)
        longitude: Longitude in decimal degrees (positive = East)
        timezone: IANA timezone string (e.g., 'Asia/Jerusalem')
        elevation: Elevation above sea level in meters
        name: Optional descriptive name for the location
        country_code: Optional ISO 3166 country code
    """

    latitude: float
    longitude: float
    timezone: str = "Asia/Jerusalem"
    elevation: float = 0.0
    name: str = ""
    country_code: str = ""

    # Tel Aviv default values as class constants
    TEL_AVIV_LAT: ClassVar[float] = 32.0853
    TEL_AVIV_LON: ClassVar[float] = 34.7818

    @classmethod
    def tel_aviv(cls) -> "Location":
        """Create a Location instance for Tel Aviv, Israel.

        Default location: 32.0853°N, 34.7818°E, Asia/Jerusalem

        Returns:
            Location configured for Tel Aviv
        """
        return cls(
            latitude=cls.TEL_AVIV_LAT,
            longitude=cls.TEL_AVIV_LON,
            timezone="Asia/Jerusalem",
            elevation=0.0,
            name="Tel Aviv",
            country_code="IL",
        )

    def __post_init__(self) -> None:
        """Validate location parameters."""
        if not -90 <= self.latitude <= 90:
            raise InvalidLocationError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise InvalidLocationError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )
        if self.elevation < -500:
            raise InvalidLocationError(
                f"Elevation below -500m is invalid, got {self.elevation}"
            )
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidLocationError(f"Unknown timezone: {self.timezone!r}") from e

    @property
    def label(self) -> str:
        """Human readable name, falling back to coordinates."""
        if self.name:
            return self.name
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


LOCATION_PRESETS: dict[str, Location] = {
    "tel-aviv": Location.tel_aviv(),
    "jerusalem": Location(
        latitude=31.7683, longitude=35.2137,
        timezone="Asia/Jerusalem", elevation=754.0,
        name="Jerusalem", country_code="IL",
    ),
    "haifa": Location(
        latitude=32.7940, longitude=34.9896,
        timezone="Asia/Jerusalem", elevation=0.0,
        name="Haifa", country_code="IL",
    ),
    "new-york": Location(
        latitude=40.7128, longitude=-74.0060,
        timezone="America/New_York", elevation=10.0,
        name="New York", country_code="US",
    ),
    "london": Location(
        latitude=51.5074, longitude=-0.1278,
        timezone="Europe/London", elevation=11.0,
        name="London", country_code="GB",
    ),
}


def get_preset(name: str) -> Location:
    """Look up a preset location by name.

    Matching is case-insensitive and treats spaces and underscores as
    hyphens, so 'Tel Aviv' and 'tel_aviv' both resolve to 'tel-aviv'.

    Raises:
        KeyError: If no preset has that name
    """
    key = name.strip().lower().replace(" ", "-").replace("_", "-")
    return LOCATION_PRESETS[key]


def parse_location(location_str: str) -> Location:
    """Parse location from string.

    Accepts:
    - a preset name (e.g. 'tel-aviv', 'jerusalem'; case-insensitive)
    - 'lat,lon' format (e.g., '32.08,34.78'), timezone Asia/Jerusalem
    - 'lat,lon,timezone' format (e.g., '40.71,-74.01,America/New_York')

    Args:
        location_str: Location string to parse

    Returns:
        Location object

    Raises:
        ValueError: If location string is invalid
    """
    try:
        return get_preset(location_str)
    except KeyError:
        pass

    parts = [part.strip() for part in location_str.split(",")]
    if len(parts) not in (2, 3):
        raise ValueError(
            f"Invalid location format: '{location_str}'. "
            "Use a preset name or 'lat,lon[,timezone]' format."
        )

    try:
        lat = float(parts[0])
        lon = float(parts[1])
    except ValueError as e:
        raise ValueError(
            f"Invalid coordinates in '{location_str}': {e}"
        ) from e

    return Location(
        latitude=lat,
        longitude=lon,
        timezone=parts[2] if len(parts) == 3 else "Asia/Jerusalem",
        name=f"Custom ({lat:.2f}, {lon:.2f})",
    )
