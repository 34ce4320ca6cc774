"""Shabbat status web API.

A small JSON API that lets a UI poll the Shabbat status and the app lock
decision instead of computing sunset times itself.
"""

__all__ = [
    "create_app",
]


def create_app(test_config=None, settings=None):
    """Create and configure the web API application.

    Returns:
        The configured web application instance.
    """
    from shabbat_window.web.app import create_app as _create_app
    return _create_app(test_config=test_config, settings=settings)
