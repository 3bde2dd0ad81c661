"""Unified read view over stored and file-backed posts.

Stored posts live in the relational store and are mutable through the API.
File-backed posts ship as markdown documents with the deployment and are
read-only. Readers see both as one newest-first stream of ``UnifiedPost``.

Slug lookups try the relational store first, since it is the only source
that can change at runtime.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from folio.config import BlogSettings
from folio.domain.error import ImmutablePostError, NotFoundError
from folio.domain.model import FilePost, Post, Tag, UnifiedPost, UnifiedTag
from folio.domain.repository import FilePostRepository, PostRepository, TagRepository
from folio.domain.value import ContentSource, Slug
from folio.util.text import estimate_reading_time, generate_tag_slug

from .base import Service

_MIN_DATE = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class StoreSourced:
    """A post read from the relational store."""

    post: Post


@dataclass(frozen=True)
class FileSourced:
    """A post read from a markdown document."""

    post: FilePost


Sourced = Union[StoreSourced, FileSourced]


class StoreStats(BaseModel):
    """Counts over the relational store alone."""

    total_posts: int
    published_posts: int
    featured_posts: int
    total_tags: int


class MergedStats(BaseModel):
    """Counts over the merged view of both sources."""

    file_posts: int
    total_posts: int
    published_posts: int
    featured_posts: int
    total_tags: int


class ContentStats(BaseModel):
    """Aggregate counts reported by the status endpoint."""

    store: StoreStats
    merged: MergedStats


def _store_tag(tag: Tag) -> UnifiedTag:
    return UnifiedTag(
        id=tag.id,
        name=tag.name,
        slug=tag.slug.root,
        description=tag.description,
        color=tag.color,
        source=ContentSource.DATABASE,
    )


def _newest_first(posts: list[UnifiedPost]) -> list[UnifiedPost]:
    # Stable: store posts precede file posts on equal dates
    return sorted(posts, key=lambda p: p.sort_date or _MIN_DATE, reverse=True)


class ContentResolver(Service):
    """Merges the relational store and the markdown store into one read view.

    The two stores keep independent slug spaces. When a slug exists in both,
    the stored post shadows the file-backed one on lookup, and listings show
    both.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        tag_repository: TagRepository,
        file_posts: FilePostRepository,
        blog_settings: BlogSettings,
    ) -> None:
        """Initialize resolver.

        Args:
            post_repository: Relational post store
            tag_repository: Relational tag store
            file_posts: File-backed post store
            blog_settings: Defaults applied to file-backed posts
        """
        self.post_repository = post_repository
        self.tag_repository = tag_repository
        self.file_posts = file_posts
        self.blog_settings = blog_settings

    def _file_tag(self, name: str) -> UnifiedTag:
        return UnifiedTag(
            name=name,
            slug=generate_tag_slug(name),
            color=self.blog_settings.default_tag_color,
            source=ContentSource.FILE,
        )

    def normalize(self, item: Sourced) -> UnifiedPost:
        """Convert either post shape into the shared read model."""
        if isinstance(item, StoreSourced):
            post = item.post
            return UnifiedPost(
                id=post.id,
                slug=post.slug.root,
                title=post.title,
                description=post.description,
                content=post.content,
                featured=post.featured,
                published=post.published,
                published_at=post.published_at,
                reading_time=post.reading_time,
                cover_image=post.cover_image,
                author=post.author,
                created_at=post.created_at,
                updated_at=post.updated_at,
                tags=[_store_tag(tag) for tag in post.tags],
                source=ContentSource.DATABASE,
            )

        post = item.post
        return UnifiedPost(
            slug=post.slug,
            title=post.title or "Untitled",
            description=post.description,
            content=post.content,
            featured=post.featured,
            published=not post.draft,
            published_at=post.date,
            reading_time=estimate_reading_time(
                post.content, self.blog_settings.words_per_minute
            ),
            cover_image=post.cover_image,
            author=post.author or self.blog_settings.default_author,
            created_at=post.date,
            updated_at=post.date,
            tags=[self._file_tag(name) for name in post.tags],
            source=ContentSource.FILE,
        )

    async def _file_posts(self) -> list[FilePost]:
        return await asyncio.to_thread(self.file_posts.list_posts)

    async def get_store_post(self, slug: str) -> Optional[Post]:
        """Stored post for the slug, or None (file-backed posts never match)."""
        try:
            parsed = Slug(slug)
        except PydanticValidationError:
            return None
        return await self.post_repository.find_by_slug(parsed)

    async def is_file_backed(self, slug: str) -> bool:
        """Whether a markdown document exists for the slug."""
        post = await asyncio.to_thread(self.file_posts.get_by_slug, slug)
        return post is not None

    async def require_store_post(self, slug: str) -> Post:
        """Stored post targeted by a mutation.

        Raises:
            ImmutablePostError: If the slug only names a file-backed post
            NotFoundError: If neither source knows the slug
        """
        post = await self.get_store_post(slug)
        if post is not None:
            return post
        if await self.is_file_backed(slug):
            logfire.warn("Mutation rejected for file-backed post", slug=slug)
            raise ImmutablePostError(slug)
        raise NotFoundError("post", slug, "Post not found")

    async def get_post_by_slug(self, slug: str) -> Optional[UnifiedPost]:
        """Post for the slug from either source.

        Drafted file posts are returned with ``published`` false so callers
        can apply the same visibility rule as unpublished stored posts.
        """
        with logfire.span("content_resolver.get_post_by_slug", slug=slug):
            stored = await self.get_store_post(slug)
            if stored is not None:
                return self.normalize(StoreSourced(stored))

            file_post = await asyncio.to_thread(self.file_posts.get_by_slug, slug)
            if file_post is not None:
                return self.normalize(FileSourced(file_post))

            logfire.info("Post not found in any source", slug=slug)
            return None

    def _merge(self, stored: list[Post], files: list[FilePost]) -> list[UnifiedPost]:
        items: list[Sourced] = [StoreSourced(p) for p in stored]
        items.extend(FileSourced(p) for p in files)
        return _newest_first([self.normalize(item) for item in items])

    async def _tagged_file_posts(self, tag_slug: Optional[str]) -> list[FilePost]:
        posts = await self._file_posts()
        if tag_slug is None:
            return posts
        return [
            p for p in posts if any(generate_tag_slug(name) == tag_slug for name in p.tags)
        ]

    async def get_all_posts(self, tag_slug: Optional[str] = None) -> list[UnifiedPost]:
        """Every stored post plus every non-draft file post, newest first.

        Args:
            tag_slug: Only posts carrying the tag with this slug (None for all)
        """
        with logfire.span("content_resolver.get_all_posts", tag_slug=tag_slug):
            posts = self._merge(
                await self.post_repository.find_all(tag_slug=tag_slug),
                await self._tagged_file_posts(tag_slug),
            )
            logfire.info("Merged posts", count=len(posts))
            return posts

    async def get_published_posts(self, tag_slug: Optional[str] = None) -> list[UnifiedPost]:
        """Published posts from both sources, newest first, optionally by tag."""
        with logfire.span("content_resolver.get_published_posts", tag_slug=tag_slug):
            return self._merge(
                await self.post_repository.find_all(published_only=True, tag_slug=tag_slug),
                await self._tagged_file_posts(tag_slug),
            )

    async def get_featured_posts(self, limit: Optional[int] = None) -> list[UnifiedPost]:
        """Published featured posts from both sources, newest first.

        Args:
            limit: Maximum number of posts (None for all)
        """
        with logfire.span("content_resolver.get_featured_posts", limit=limit):
            posts = self._merge(
                await self.post_repository.find_all(published_only=True, featured_only=True),
                [p for p in await self._file_posts() if p.featured],
            )
            return posts if limit is None else posts[:limit]

    async def get_all_tags(self) -> list[UnifiedTag]:
        """Stored tags plus tags named by file posts, sorted by name.

        Names are compared case-insensitively; a stored tag wins over a file
        tag of the same name.
        """
        with logfire.span("content_resolver.get_all_tags"):
            tags: dict[str, UnifiedTag] = {}
            for tag in await self.tag_repository.find_all():
                tags.setdefault(tag.name.lower(), _store_tag(tag))
            for post in await self._file_posts():
                for name in post.tags:
                    if name.lower() not in tags:
                        tags[name.lower()] = self._file_tag(name)

            return sorted(tags.values(), key=lambda t: t.name.lower())

    async def get_stats(self) -> ContentStats:
        """Counts for both the relational store and the merged view."""
        with logfire.span("content_resolver.get_stats"):
            store = StoreStats(
                total_posts=await self.post_repository.count(),
                published_posts=await self.post_repository.count(published_only=True),
                featured_posts=await self.post_repository.count(
                    published_only=True, featured_only=True
                ),
                total_tags=len(await self.tag_repository.find_all()),
            )

            files = await self._file_posts()
            merged = MergedStats(
                file_posts=len(files),
                total_posts=store.total_posts + len(files),
                published_posts=store.published_posts + len(files),
                featured_posts=store.featured_posts + sum(1 for p in files if p.featured),
                total_tags=len(await self.get_all_tags()),
            )
            return ContentStats(store=store, merged=merged)
