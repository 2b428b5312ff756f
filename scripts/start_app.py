#!/usr/bin/env python3
"""Start the API under uvicorn with logging and Logfire configured first."""

import sys
import logfire
import uvicorn

from photoshare.config import Settings
from photoshare.util.logging import setup_logging
from photoshare.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configured before the app module is imported so instrumentation attaches
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Photoshare API",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "photoshare.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
