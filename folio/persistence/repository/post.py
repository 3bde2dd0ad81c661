"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.config import Settings
from folio.domain.error import ConflictError, NotFoundError, ValidationError
from folio.domain.model import NewPost, Post, PostPatch, Tag, TagRef, utcnow
from folio.domain.repository.post import PostRepository
from folio.domain.value import PostId, Slug, TagId
from folio.persistence.mappers import (
    new_post_to_dict,
    patch_to_dict,
    row_to_post,
    row_to_tag,
)
from folio.persistence.tables import post_tags_table, posts_table, tags_table
from folio.util.text import generate_tag_slug


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Post rows and their tag associations are written inside a savepoint so
    a failed write leaves neither behind.
    """

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            settings: Application settings
        """
        self.session = session
        self.settings = settings

    async def _fetch_tags_for_posts(self, post_ids: list[int]) -> dict[int, list[Tag]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tags
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[int, list[Tag]] = defaultdict(list)
        for row in result.fetchall():
            data = row._asdict()
            post_tag_map[data.pop("post_id")].append(row_to_tag(data))

        return post_tag_map

    async def _rows_to_posts(self, rows: Sequence) -> List[Post]:
        """Build Post models for rows, loading their tags in one query."""
        post_tag_map = await self._fetch_tags_for_posts([row.id for row in rows])
        return [
            row_to_post(row._asdict(), tags=post_tag_map.get(row.id, []))
            for row in rows
        ]

    async def _resolve_tag_id(self, ref: TagRef) -> TagId:
        """Resolve a tag reference, creating named tags that don't exist yet."""
        if isinstance(ref, int):
            stmt = select(tags_table.c.id).where(tags_table.c.id == ref)
            tag_id = (await self.session.execute(stmt)).scalar()
            if tag_id is None:
                raise ValidationError(f"Tag not found: {ref}")
            return TagId(tag_id)

        name = ref.strip()
        slug = generate_tag_slug(name)
        if not name or not slug:
            raise ValidationError(f"Invalid tag name: {ref!r}")

        # Reuse a tag matching by name, or by the slug the name derives to
        existing = select(tags_table.c.id).where(
            (tags_table.c.name == name) | (tags_table.c.slug == slug)
        )
        tag_id = (await self.session.execute(existing)).scalar()
        if tag_id is not None:
            return TagId(tag_id)

        stmt = (
            insert(tags_table)
            .values(
                name=name,
                slug=slug,
                description=None,
                color=self.settings.blog.default_tag_color,
            )
            .returning(tags_table.c.id)
        )
        try:
            async with self.session.begin_nested():
                tag_id = (await self.session.execute(stmt)).scalar_one()
        except IntegrityError as e:
            # Another request created the tag since the lookup above
            tag_id = (await self.session.execute(existing)).scalar()
            if tag_id is None:
                raise ConflictError("tag", "name", name) from e
            logfire.info("Tag created concurrently, reusing it", tag_id=tag_id, name=name)
            return TagId(tag_id)

        logfire.info("Tag created for post", tag_id=tag_id, name=name, slug=slug)
        return TagId(tag_id)

    async def _associate_tags(self, post_id: PostId, refs: list[TagRef]) -> None:
        """Link a post to the referenced tags."""
        tag_ids: list[TagId] = []
        for ref in refs:
            tag_id = await self._resolve_tag_id(ref)
            if tag_id not in tag_ids:
                tag_ids.append(tag_id)

        if tag_ids:
            await self.session.execute(
                insert(post_tags_table),
                [{"post_id": post_id, "tag_id": tag_id} for tag_id in tag_ids],
            )

    async def create(self, post: NewPost) -> PostId:
        """Insert a post and associate its tags atomically."""
        with logfire.span(
            "post_repository.create", slug=post.slug.root, tags=list(map(str, post.tags))
        ):
            now = utcnow()
            async with self.session.begin_nested():
                try:
                    result = await self.session.execute(
                        insert(posts_table)
                        .values(**new_post_to_dict(post), created_at=now, updated_at=now)
                        .returning(posts_table.c.id)
                    )
                except IntegrityError as e:
                    logfire.warn("Duplicate post slug", slug=post.slug.root)
                    raise ConflictError("post", "slug", post.slug.root) from e

                post_id = PostId(result.scalar_one())
                await self._associate_tags(post_id, post.tags)

            await self.session.flush()
            logfire.info("Post inserted", post_id=post_id, slug=post.slug.root)
            return post_id

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            row = (await self.session.execute(stmt)).fetchone()

            if not row:
                logfire.warn("Post not found", post_id=post_id)
                return None

            return (await self._rows_to_posts([row]))[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=slug.root):
            stmt = select(posts_table).where(posts_table.c.slug == slug.root)
            row = (await self.session.execute(stmt)).fetchone()

            if not row:
                logfire.debug("Post not found by slug", slug=slug.root)
                return None

            return (await self._rows_to_posts([row]))[0]

    def _filtered(self, stmt, published_only: bool, featured_only: bool):
        if published_only:
            stmt = stmt.where(posts_table.c.published.is_(True))
        if featured_only:
            stmt = stmt.where(posts_table.c.featured.is_(True))
        return stmt

    async def find_all(
        self,
        published_only: bool = False,
        featured_only: bool = False,
        limit: Optional[int] = None,
        tag_slug: Optional[str] = None,
    ) -> List[Post]:
        """Find posts newest first."""
        with logfire.span(
            "post_repository.find_all",
            published_only=published_only,
            featured_only=featured_only,
            limit=limit,
            tag_slug=tag_slug,
        ):
            stmt = self._filtered(select(posts_table), published_only, featured_only)
            if tag_slug is not None:
                tagged = (
                    select(post_tags_table.c.post_id)
                    .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
                    .where(tags_table.c.slug == tag_slug)
                )
                stmt = stmt.where(posts_table.c.id.in_(tagged))
            stmt = stmt.order_by(
                desc(func.coalesce(posts_table.c.published_at, posts_table.c.created_at)),
                desc(posts_table.c.id),
            )
            if limit is not None:
                stmt = stmt.limit(limit)

            rows = (await self.session.execute(stmt)).fetchall()
            if not rows:
                logfire.info("No posts found")
                return []

            posts = await self._rows_to_posts(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        published_only: bool = False,
        featured_only: bool = False,
    ) -> int:
        """Count posts matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(posts_table), published_only, featured_only
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update(self, post_id: PostId, patch: PostPatch) -> None:
        """Apply a sparse patch to a post."""
        values = patch_to_dict(patch)
        with logfire.span(
            "post_repository.update", post_id=post_id, fields=sorted(patch.model_fields_set)
        ):
            values["updated_at"] = utcnow()
            async with self.session.begin_nested():
                try:
                    result = await self.session.execute(
                        update(posts_table)
                        .where(posts_table.c.id == post_id)
                        .values(**values)
                    )
                except IntegrityError as e:
                    logfire.warn("Duplicate post slug on update", slug=values.get("slug"))
                    raise ConflictError("post", "slug", str(values.get("slug"))) from e

                if result.rowcount == 0:
                    raise NotFoundError("post", str(post_id))

                if patch.is_set("tags"):
                    await self.session.execute(
                        delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
                    )
                    await self._associate_tags(post_id, patch.tags or [])

            await self.session.flush()
            logfire.info("Post updated", post_id=post_id)

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its tag associations."""
        with logfire.span("post_repository.delete", post_id=post_id):
            async with self.session.begin_nested():
                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
                )
                result = await self.session.execute(
                    delete(posts_table).where(posts_table.c.id == post_id)
                )
                if result.rowcount == 0:
                    raise NotFoundError("post", str(post_id))

            await self.session.flush()
            logfire.info("Post deleted", post_id=post_id)

    async def delete_all(self) -> int:
        """Delete every post."""
        with logfire.span("post_repository.delete_all"):
            async with self.session.begin_nested():
                await self.session.execute(delete(post_tags_table))
                result = await self.session.execute(delete(posts_table))

            await self.session.flush()
            deleted = result.rowcount or 0
            logfire.info("All posts deleted", count=deleted)
            return deleted
