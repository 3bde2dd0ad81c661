"""Engine and session factory for the posts and tags store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from folio.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Async engine for ``settings.database``.

    SQL is echoed in debug mode. Connections are pinged on checkout since
    the API can sit idle between admin edits.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are read back explicitly after writes, so nothing needs expiring
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
