"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.error import ConflictError
from folio.domain.model.tag import NewTag, Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import TagId
from folio.persistence.mappers import new_tag_to_dict, row_to_tag
from folio.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, tag: NewTag) -> TagId:
        """Insert a tag."""
        with logfire.span("tag_repository.create", name=tag.name, slug=tag.slug.root):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(
                        insert(tags_table)
                        .values(**new_tag_to_dict(tag))
                        .returning(tags_table.c.id)
                    )
                    tag_id = TagId(result.scalar_one())
            except IntegrityError as e:
                logfire.warn("Duplicate tag", name=tag.name, slug=tag.slug.root)
                raise ConflictError("tag", "name", tag.name) from e

            await self.session.flush()
            logfire.info("Tag created", tag_id=tag_id, name=tag.name)
            return tag_id

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        row = (await self.session.execute(stmt)).fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name)
        row = (await self.session.execute(stmt)).fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        rows = (await self.session.execute(stmt)).fetchall()
        return [row_to_tag(row._asdict()) for row in rows]
