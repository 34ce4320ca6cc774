"""Tests for display formatting."""

from datetime import datetime

import pandas as pd
import pytest

from shabbat_window.calculator import get_status
from shabbat_window.formatting import (
    StatusDisplay,
    describe_status,
    format_clock_time,
    format_duration,
)
from shabbat_window.location import Location


class TestFormatDuration:
    """Test format_duration."""

    @pytest.mark.parametrize("minutes,expected", [
        (0, "0 minutes"),
        (1, "1 minute"),
        (30, "30 minutes"),
        (59, "59 minutes"),
        (60, "1 hour"),
        (120, "2 hours"),
        (75, "1h 15m"),
        (90, "1h 30m"),
        (150, "2h 30m"),
        (1439, "23h 59m"),
        (1440, "1 day"),
        (2880, "2 days"),
        (1500, "1d 1h"),
        (3000, "2d 2h"),
    ])
    def test_table(self, minutes, expected):
        """Durations render in minute, hour, and day forms."""
        assert format_duration(minutes) == expected

    def test_day_scale_drops_minutes(self):
        """Leftover minutes under an hour do not show at day scale."""
        assert format_duration(1441) == "1 day"
        assert format_duration(1530) == "1d 1h"
        assert format_duration(1499) == "1 day"
        assert format_duration(2879) == "1d 23h"

    def test_negative_raises(self):
        """Negative durations are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            format_duration(-1)


class TestFormatClockTime:
    """Test format_clock_time."""

    def test_midnight(self):
        """Midnight renders as 00:00."""
        assert format_clock_time(datetime(2025, 1, 10, 0, 0)) == "00:00"

    def test_noon(self):
        """Noon renders as 12:00."""
        assert format_clock_time(datetime(2025, 1, 10, 12, 0)) == "12:00"

    def test_evening_is_24_hour(self):
        """Evening times use 24-hour clock."""
        assert format_clock_time(datetime(2025, 1, 10, 17, 30)) == "17:30"

    def test_converted_to_location_time(self):
        """Aware instants are shown in the location's timezone."""
        instant = pd.Timestamp("2025-01-10 15:05", tz="UTC")
        assert format_clock_time(instant, Location.tel_aviv()) == "17:05"

    def test_own_timezone_without_location(self):
        """Without a location the instant's own wall clock is used."""
        instant = pd.Timestamp("2025-01-10 15:05", tz="UTC")
        assert format_clock_time(instant) == "15:05"


class TestDescribeStatus:
    """Test describe_status."""

    def test_outside_window(self, tel_aviv, fixed_provider):
        """Only start fields are filled outside a window."""
        status = get_status(pd.Timestamp("2025-01-10 14:42", tz="Asia/Jerusalem"), tel_aviv, fixed_provider)
        display = describe_status(status, tel_aviv)

        assert display == StatusDisplay(
            is_shabbat=False,
            formatted_time_until_start="2 hours",
            formatted_start_time="16:42",
        )

    def test_inside_window(self, tel_aviv, fixed_provider):
        """Only end fields are filled inside a window."""
        status = get_status(pd.Timestamp("2025-01-11 15:12", tz="Asia/Jerusalem"), tel_aviv, fixed_provider)
        display = describe_status(status, tel_aviv)

        assert display.is_shabbat is True
        assert display.formatted_time_until_end == "2h 30m"
        assert display.formatted_end_time == "17:42"
        assert display.formatted_time_until_start is None
        assert display.formatted_start_time is None
