#!/usr/bin/env python3
"""Start the Q&A API with logging and Logfire configured first."""

import sys
import logfire
import uvicorn

from qna.config import Settings
from qna.util.logging import setup_logging
from qna.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Q&A API", host=settings.host, port=settings.port
        )

        uvicorn.run(
            "qna.interface.api.app:app",
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
        raise


if __name__ == "__main__":
    sys.exit(main())
