#!/usr/bin/env python3
"""Apply the blog schema migrations.

Run before the API starts; a failure exits non-zero so the deployment
never serves against a stale schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from folio.config import Settings
from folio.util.logging import setup_logging
from folio.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Blog schema migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Blog schema up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
