"""Basic package tests."""

import shabbat_window


def test_version_exists():
    """Package has a version string."""
    assert hasattr(shabbat_window, "__version__")
    assert isinstance(shabbat_window.__version__, str)


def test_version_format():
    """Version follows semantic versioning format."""
    version = shabbat_window.__version__
    parts = version.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api():
    """Core operations are exported at package level."""
    for name in ("compute_window", "is_within_window", "get_status",
                 "format_duration", "format_clock_time", "lock_state"):
        assert callable(getattr(shabbat_window, name))


def test_get_cli_app():
    """The CLI app is available programmatically."""
    from typer import Typer

    assert isinstance(shabbat_window.get_cli_app(), Typer)
