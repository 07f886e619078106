"""
Flask Application Factory.

Creates and configures the Flask application serving holiday lookups.
"""

import os
import signal
import sys
from typing import Optional

from flask import Flask

from holiday_rules.api import api_bp
from holiday_rules.config import settings
from holiday_rules.infrastructure.logging import log_request_context, logger


def _handle_sigterm(signum: int, frame) -> None:
    """Handle SIGTERM for graceful shutdown."""
    logger.with_fields(signal=signum).info("Received SIGTERM, shutting down gracefully")
    sys.exit(0)


def create_app(config: Optional[dict] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    app.json.sort_keys = False

    if config:
        app.config.update(config)

    log_request_context(app)

    app.register_blueprint(api_bp)

    logger.with_fields(
        environment=os.environ.get("ENVIRONMENT", "development"),
        min_year=settings.calendar.min_year,
        max_year=settings.calendar.max_year,
    ).info("Application initialized")

    return app


def main() -> None:
    """Run the development server."""
    signal.signal(signal.SIGTERM, _handle_sigterm)

    app = create_app()
    app.run(
        host="0.0.0.0",
        port=settings.port,
        debug=settings.debug,
    )


if __name__ == "__main__":
    main()
