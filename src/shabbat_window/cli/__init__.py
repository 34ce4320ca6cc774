"""CLI for the Shabbat window calculator.

Provides command-line access to Shabbat status, upcoming times,
the app lock decision, and settings management.
"""

from shabbat_window.cli.main import app

__all__ = ["app"]
