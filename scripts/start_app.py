#!/usr/bin/env python3
"""Serve the blog API under uvicorn.

Logfire is configured before the app factory runs so startup failures
(bad settings, unreachable database) are recorded.
"""

import sys

import logfire
import uvicorn

from folio.config import Settings
from folio.util.logging import setup_logging
from folio.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting blog API",
            host=settings.host,
            port=settings.port,
            content_root=str(settings.content.root),
        )
        uvicorn.run(
            "folio.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Blog API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
