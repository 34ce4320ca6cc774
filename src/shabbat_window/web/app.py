"""Flask application factory for the Shabbat status API."""

from typing import Optional

from flask import Flask

from shabbat_window.config import Settings


def create_app(
    test_config: Optional[dict] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    """Create and configure the Flask API application.

    Uses the application factory pattern to allow multiple instances
    and easy testing with different configurations.

    Args:
        test_config: Optional configuration dict to override defaults.
            Useful for testing (e.g. a SUNSET_PROVIDER fake).
        settings: Application settings; defaults to Tel Aviv.

    Returns:
        Flask: The configured Flask application instance.
    """
    app = Flask(__name__)

    app.config.from_mapping(
        SHABBAT_SETTINGS=settings or Settings(),
        SUNSET_PROVIDER=None,
    )

    if test_config is not None:
        # Override with test-specific configuration when provided
        app.config.from_mapping(test_config)

    from shabbat_window.web.routes import bp
    app.register_blueprint(bp)

    return app


if __name__ == "__main__":
    application = create_app()
    application.run(debug=True)
