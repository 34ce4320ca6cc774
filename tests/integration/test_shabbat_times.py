"""Integration tests for Shabbat windows computed from real sunsets in Tel Aviv."""

import pandas as pd
import pytest

from shabbat_window.calculator import (
    compute_window,
    get_status,
    is_within_window,
)
from shabbat_window.location import LOCATION_PRESETS, Location
from shabbat_window.lock import lock_state

TEL_AVIV = Location.tel_aviv()


def local(value: str) -> pd.Timestamp:
    return pd.Timestamp(value, tz="Asia/Jerusalem")


@pytest.mark.integration
class TestWindowProperties:
    """Properties that hold for real sunsets."""

    @pytest.mark.parametrize("location_key", ["tel-aviv", "jerusalem", "new-york", "london"])
    def test_ordering_across_year(self, location_key):
        """Havdalah follows candle-lighting by 24 to 26 hours all year."""
        location = LOCATION_PRESETS[location_key]
        start = pd.Timestamp("2025-01-01 12:00", tz=location.timezone)
        for week in range(0, 52, 4):
            times = compute_window(start + pd.Timedelta(weeks=week), location)
            assert times.havdalah > times.candle_lighting
            assert pd.Timedelta(hours=24) <= times.duration < pd.Timedelta(hours=26)
            assert times.candle_lighting.weekday() == 4
            assert times.havdalah.weekday() == 5

    def test_friday_and_saturday_share_window(self):
        """Friday and the following Saturday give the same window."""
        friday = compute_window(local("2025-01-10 10:00"), TEL_AVIV)
        saturday = compute_window(local("2025-01-11 22:00"), TEL_AVIV)
        assert friday == saturday

    def test_winter_candle_lighting_time(self):
        """Candle-lighting in Tel Aviv in January is around 16:40."""
        times = compute_window(local("2025-01-08 12:00"), TEL_AVIV)
        assert times.candle_lighting.date() == pd.Timestamp("2025-01-10").date()
        assert local("2025-01-10 16:25") <= times.candle_lighting <= local("2025-01-10 16:55")
        assert local("2025-01-11 17:25") <= times.havdalah <= local("2025-01-11 17:55")


@pytest.mark.integration
class TestScenarios:
    """End-to-end scenarios in Tel Aviv."""

    def test_wednesday_noon(self):
        """Wednesday noon is not Shabbat and counts down to Friday."""
        now = local("2025-01-08 12:00")
        status = get_status(now, TEL_AVIV)

        assert status.is_shabbat is False
        assert status.next_shabbat_start == compute_window(now, TEL_AVIV).candle_lighting
        assert status.minutes_until_start > 0

    def test_friday_morning(self):
        """Friday morning is before candle-lighting."""
        assert is_within_window(local("2025-01-10 10:00"), TEL_AVIV) is False

    def test_one_hour_after_candle_lighting(self):
        """An hour into the window is Shabbat, ending at that week's Havdalah."""
        times = compute_window(local("2025-01-10 12:00"), TEL_AVIV)
        status = get_status(times.candle_lighting + pd.Timedelta(hours=1), TEL_AVIV)

        assert status.is_shabbat is True
        assert status.shabbat_end == times.havdalah
        assert status.minutes_until_end > 0

    def test_saturday_midday(self):
        """Saturday midday is inside the window."""
        times = compute_window(local("2025-01-10 12:00"), TEL_AVIV)
        assert is_within_window(times.candle_lighting + pd.Timedelta(hours=18), TEL_AVIV)

    def test_two_hours_after_havdalah(self):
        """After Havdalah the next start is a week after the one just passed."""
        times = compute_window(local("2025-01-10 12:00"), TEL_AVIV)
        status = get_status(times.havdalah + pd.Timedelta(hours=2), TEL_AVIV)
        next_times = compute_window(local("2025-01-17 12:00"), TEL_AVIV)

        assert status.is_shabbat is False
        assert status.next_shabbat_start == next_times.candle_lighting
        assert pd.Timedelta(days=6, hours=23) < status.next_shabbat_start - times.candle_lighting
        assert status.next_shabbat_start - times.candle_lighting < pd.Timedelta(days=7, hours=1)

    def test_boundaries_inclusive(self):
        """Exactly at candle-lighting and Havdalah is inside."""
        times = compute_window(local("2025-01-10 12:00"), TEL_AVIV)
        assert is_within_window(times.candle_lighting, TEL_AVIV)
        assert is_within_window(times.havdalah, TEL_AVIV)
        assert not is_within_window(times.havdalah + pd.Timedelta(seconds=1), TEL_AVIV)

    def test_near_end_never_negative(self):
        """Five minutes before Havdalah the countdown is non-negative."""
        times = compute_window(local("2025-01-10 12:00"), TEL_AVIV)
        status = get_status(times.havdalah - pd.Timedelta(minutes=5), TEL_AVIV)
        assert status.minutes_until_end >= 0

    def test_lock_during_shabbat(self):
        """The lock policy locks on Saturday and unlocks on Sunday."""
        assert lock_state(local("2025-01-11 12:00"), TEL_AVIV).is_locked is True
        assert lock_state(local("2025-01-12 12:00"), TEL_AVIV).is_locked is False
