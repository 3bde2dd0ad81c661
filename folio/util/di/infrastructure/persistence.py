"""Relational store providers: engine, per-request session, repositories."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from folio.config import Settings
from folio.domain.repository import PostRepository, TagRepository
from folio.persistence.database import create_engine, create_session_factory
from folio.persistence.repository import PostgresPostRepository, PostgresTagRepository
from folio.util.di.base import ProviderBase
from folio.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Posts and tags store component."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Posts and tags in PostgreSQL.

    One session per request; every write in the request commits together.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def sessions(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, sessions: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request session, committed when the request scope closes.

        Repositories undo their own partial writes with savepoints.
        """
        async with sessions() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request session", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def posts(self, session: AsyncSession, settings: Settings) -> PostRepository:
        return PostgresPostRepository(session, settings)

    @provide(scope=Scope.REQUEST)
    def tags(self, session: AsyncSession) -> TagRepository:
        return PostgresTagRepository(session)
