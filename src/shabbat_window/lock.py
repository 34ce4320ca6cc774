"""App lock policy built on the Shabbat status.

While a Shabbat window is open, interactive functionality is expected to be
blocked. If the window cannot be determined, the policy fails open so that
an astronomy failure never locks the whole application.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from shabbat_window.calculator import Instant, get_status
from shabbat_window.formatting import format_clock_time
from shabbat_window.location import Location
from shabbat_window.sun import SunsetProvider

logger = logging.getLogger(__name__)

DEFAULT_LOCK_MESSAGE = (
    "The app is currently unavailable during Shabbat. "
    "Please try again after Havdalah."
)
UNDETERMINED_MESSAGE = "Unable to determine Shabbat window"


@dataclass(frozen=True)
class LockState:
    """Result of the lock policy.

    Attributes:
        is_locked: Whether interactive functionality should be blocked
        lock_message: Message to show while locked (empty otherwise)
        unlock_time: HH:MM local time the lock lifts (None when unlocked)
        error: Set when the window could not be determined
    """

    is_locked: bool
    lock_message: str = ""
    unlock_time: Optional[str] = None
    error: Optional[str] = None


def lock_state(
    instant: Optional[Instant] = None,
    location: Optional[Location] = None,
    provider: Optional[SunsetProvider] = None,
    message: str = DEFAULT_LOCK_MESSAGE,
) -> LockState:
    """Decide whether the app should be locked at an instant.

    Args:
        instant: Point in time to evaluate (defaults to now)
        location: Where to evaluate (defaults to Tel Aviv)
        provider: Sunset source (defaults to pvlib SPA)
        message: Message shown while locked

    Returns:
        LockState; unlocked with error set if the calculation failed
    """
    location = location or Location.tel_aviv()
    try:
        status = get_status(instant, location, provider)
    except Exception:
        logger.warning(
            "Failing open: could not compute Shabbat status for %s",
            location.label,
            exc_info=True,
        )
        return LockState(is_locked=False, error=UNDETERMINED_MESSAGE)

    if not status.is_shabbat:
        return LockState(is_locked=False)

    return LockState(
        is_locked=True,
        lock_message=message,
        unlock_time=format_clock_time(status.shabbat_end, location),
    )
