#!/usr/bin/env python3
"""Upgrade the lets-connect schema with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f5b7e2a90
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from letsconnect.config import Settings
from letsconnect.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision and log any failure."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    try:
        logfire.info("Starting database migrations", revision=revision)
        command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            revision=revision,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
