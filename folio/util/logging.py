"""Standard library logging for the blog API.

Third-party libraries (uvicorn, alembic, sqlalchemy) log through the
standard library. Their records are forwarded to Logfire so they appear
next to the application's own spans.
"""

import logging

import logfire

from folio.config import Settings

# Loggers that are chatty below WARNING outside debug mode
NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "uvicorn.access", "alembic.runtime.migration")


def log_level(settings: Settings) -> int:
    """Root level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment in ("test", "development"):
        return logging.INFO
    return logging.WARNING


def setup_logging(settings: Settings) -> None:
    """Route standard library logging into Logfire.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    if not settings.debug:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("folio").setLevel(level)
