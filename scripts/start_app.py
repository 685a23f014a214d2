#!/usr/bin/env python3
"""Start the lets-connect API with Logfire tracking for startup errors."""

import sys
import logfire
import uvicorn

from letsconnect.config import Settings
from letsconnect.util.logging import setup_logging
from letsconnect.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the application factory."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting lets-connect API",
            environment=settings.environment,
            port=settings.port,
        )
        uvicorn.run(
            "letsconnect.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
