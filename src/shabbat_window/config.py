"""Configuration file support.

Settings are loaded from YAML or JSON files. A settings file names the
location Shabbat times are computed for, the lock message, and how often
callers should refresh the status.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import yaml

from shabbat_window.location import Location, get_preset
from shabbat_window.lock import DEFAULT_LOCK_MESSAGE

DEFAULT_REFRESH_INTERVAL_SECONDS = 60


class ConfigurationError(Exception):
    """Raised when configuration file is invalid."""

    pass


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        location: Location Shabbat times are computed for
        lock_message: Message shown while the app is locked
        refresh_interval_seconds: How often callers should recompute status
    """

    location: Location = field(default_factory=Location.tel_aviv)
    lock_message: str = DEFAULT_LOCK_MESSAGE
    refresh_interval_seconds: int = DEFAULT_REFRESH_INTERVAL_SECONDS

    def __post_init__(self) -> None:
        if self.refresh_interval_seconds <= 0:
            raise ConfigurationError(
                "refresh_interval_seconds must be positive, "
                f"got {self.refresh_interval_seconds}"
            )


def load_config_yaml(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Parsed configuration dictionary

    Raises:
        ConfigurationError: If file cannot be read or parsed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if config is None:
        raise ConfigurationError(f"Empty configuration file: {path}")
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")
    return config


def load_config_json(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to JSON configuration file

    Returns:
        Parsed configuration dictionary

    Raises:
        ConfigurationError: If file cannot be read or parsed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")
    return config


def load_config(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from YAML or JSON file.

    Auto-detects format by file extension.

    Args:
        path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        Parsed configuration dictionary

    Raises:
        ConfigurationError: If file cannot be read or format unknown
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in (".yaml", ".yml"):
        return load_config_yaml(path)
    elif suffix == ".json":
        return load_config_json(path)
    else:
        raise ConfigurationError(
            f"Unknown configuration file format: {suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )


def parse_location(data: dict[str, Any]) -> Location:
    """Parse a location section.

    Accepts either ``preset: <name>`` or explicit coordinates.

    Raises:
        ConfigurationError: If the section is invalid
    """
    if not isinstance(data, dict):
        raise ConfigurationError("location section must be a mapping")

    if "preset" in data:
        try:
            return get_preset(str(data["preset"]))
        except KeyError as e:
            raise ConfigurationError(
                f"Unknown location preset: {data['preset']!r}"
            ) from e

    missing = [key for key in ("latitude", "longitude") if key not in data]
    if missing:
        raise ConfigurationError(
            f"location section is missing: {', '.join(missing)}"
        )

    try:
        return Location(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            timezone=data.get("timezone", "Asia/Jerusalem"),
            elevation=float(data.get("elevation", 0.0)),
            name=data.get("name", ""),
            country_code=data.get("country_code", ""),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid location: {e}") from e


def parse_settings(config: dict[str, Any]) -> Settings:
    """Build Settings from a parsed configuration dictionary."""
    location_data = config.get("location")
    location = parse_location(location_data) if location_data else Location.tel_aviv()

    lock_data = config.get("lock") or {}
    if not isinstance(lock_data, dict):
        raise ConfigurationError("lock section must be a mapping")

    try:
        refresh = int(config.get("refresh_interval_seconds", DEFAULT_REFRESH_INTERVAL_SECONDS))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid refresh_interval_seconds: {e}") from e

    return Settings(
        location=location,
        lock_message=str(lock_data.get("message", DEFAULT_LOCK_MESSAGE)),
        refresh_interval_seconds=refresh,
    )


def load_settings(path: Union[str, Path]) -> Settings:
    """Load Settings from a configuration file.

    Raises:
        ConfigurationError: If the file or its contents are invalid
    """
    return parse_settings(load_config(path))
