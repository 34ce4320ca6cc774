"""Flask Blueprint routes for the Shabbat status API."""

from typing import Any, Optional

import pandas as pd
from flask import Blueprint, current_app, jsonify, request

from shabbat_window.calculator import (
    ShabbatTimes,
    get_status,
    to_local,
    upcoming_windows,
)
from shabbat_window.config import Settings
from shabbat_window.formatting import describe_status, format_clock_time
from shabbat_window.location import Location, parse_location
from shabbat_window.lock import lock_state

bp = Blueprint("api", __name__, url_prefix="/api")

MAX_WEEKS = 52


def _settings() -> Settings:
    return current_app.config["SHABBAT_SETTINGS"]


def _resolve_location(value: Optional[str]) -> Location:
    """Map a location query parameter to a Location instance.

    Accepts preset names or a 'lat,lon[,timezone]' string. Without a
    value the configured location is used.

    Raises:
        ValueError: If the value names no preset and is not coordinates
    """
    if not value:
        return _settings().location
    return parse_location(value)


def _parse_instant(value: Optional[str], location: Location) -> pd.Timestamp:
    if not value:
        return pd.Timestamp.now(tz=location.timezone)
    return to_local(pd.Timestamp(value), location)


def _isoformat(ts: Optional[pd.Timestamp]) -> Optional[str]:
    return ts.isoformat() if ts is not None else None


def _location_json(location: Location) -> dict[str, Any]:
    return {
        "name": location.label,
        "latitude": location.latitude,
        "longitude": location.longitude,
        "timezone": location.timezone,
        "country_code": location.country_code,
    }


def _window_json(times: ShabbatTimes, location: Location) -> dict[str, Any]:
    return {
        "candle_lighting": times.candle_lighting.isoformat(),
        "havdalah": times.havdalah.isoformat(),
        "candle_lighting_time": format_clock_time(times.candle_lighting, location),
        "havdalah_time": format_clock_time(times.havdalah, location),
    }


@bp.errorhandler(ValueError)
def handle_bad_request(error: ValueError):
    """Return JSON 400 for invalid query parameters."""
    return jsonify({"error": str(error)}), 400


@bp.route("/status")
def status():
    """Current Shabbat status with display strings."""
    location = _resolve_location(request.args.get("location"))
    instant = _parse_instant(request.args.get("at"), location)

    result = get_status(instant, location, current_app.config["SUNSET_PROVIDER"])
    display = describe_status(result, location)

    return jsonify({
        "location": _location_json(location),
        "is_shabbat": result.is_shabbat,
        "current_time": result.current_time.isoformat(),
        "next_shabbat_start": _isoformat(result.next_shabbat_start),
        "shabbat_end": _isoformat(result.shabbat_end),
        "minutes_until_start": result.minutes_until_start,
        "minutes_until_end": result.minutes_until_end,
        "formatted_time_until_start": display.formatted_time_until_start,
        "formatted_time_until_end": display.formatted_time_until_end,
        "formatted_start_time": display.formatted_start_time,
        "formatted_end_time": display.formatted_end_time,
    })


@bp.route("/times")
def times():
    """Upcoming candle-lighting and Havdalah times."""
    location = _resolve_location(request.args.get("location"))
    start = _parse_instant(request.args.get("from"), location)
    weeks = int(request.args.get("weeks", "4"))
    if not 1 <= weeks <= MAX_WEEKS:
        raise ValueError(f"weeks must be between 1 and {MAX_WEEKS}, got {weeks}")

    windows = upcoming_windows(
        start, location, count=weeks, provider=current_app.config["SUNSET_PROVIDER"]
    )
    return jsonify({
        "location": _location_json(location),
        "windows": [_window_json(w, location) for w in windows],
    })


@bp.route("/lock")
def lock():
    """App lock decision; fails open if the window cannot be determined."""
    settings = _settings()
    location = _resolve_location(request.args.get("location"))
    instant = _parse_instant(request.args.get("at"), location)

    state = lock_state(
        instant,
        location,
        provider=current_app.config["SUNSET_PROVIDER"],
        message=settings.lock_message,
    )
    return jsonify({
        "is_locked": state.is_locked,
        "lock_message": state.lock_message,
        "unlock_time": state.unlock_time,
        "error": state.error,
        "refresh_after_seconds": settings.refresh_interval_seconds,
    })
