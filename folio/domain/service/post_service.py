"""Post domain service."""

from datetime import datetime, timezone
from typing import Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from folio.config import BlogSettings
from folio.domain.error import NotFoundError, ValidationError
from folio.domain.model import NewPost, Post, PostPatch, TagRef, utcnow
from folio.domain.repository import PostRepository
from folio.domain.value import PostId, Slug
from folio.util.text import estimate_reading_time, generate_slug

from .base import Service

# Path segments under /blog that name listings, not posts
RESERVED_SLUGS = frozenset({"featured", "tags"})


def _unreserved(slug: Slug) -> Slug:
    if slug.root in RESERVED_SLUGS:
        raise ValidationError(f"Slug is reserved: {slug.root!r}")
    return slug


def parse_slug(value: str) -> Slug:
    """Validate a caller-supplied slug.

    Raises:
        ValidationError: If the value is not a well-formed slug, or is reserved
    """
    try:
        slug = Slug(value)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid slug: {value!r}") from e
    return _unreserved(slug)


def slug_from_title(title: str) -> Slug:
    """Derive a slug from a title.

    Raises:
        ValidationError: If the title has no characters usable in a slug, or
            derives a reserved slug (supply an explicit slug instead)
    """
    slug = generate_slug(title)
    if not slug:
        raise ValidationError("Title must contain at least one letter or digit")
    return _unreserved(Slug(slug))


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _require_text(field: str, value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field.capitalize()} is required")
    return value


class PostService(Service):
    """Domain service for stored posts.

    Owns the derived fields: slug, reading time and first publication date.
    """

    def __init__(self, post_repository: PostRepository, blog_settings: BlogSettings) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            blog_settings: Blog defaults (author, reading speed)
        """
        self.post_repository = post_repository
        self.blog_settings = blog_settings

    def _reading_time(self, content: str) -> int:
        return estimate_reading_time(content, self.blog_settings.words_per_minute)

    async def create_post(
        self,
        title: Optional[str],
        content: Optional[str],
        slug: Optional[str] = None,
        description: Optional[str] = None,
        featured: bool = False,
        published: bool = False,
        published_at: Optional[datetime] = None,
        cover_image: Optional[str] = None,
        author: Optional[str] = None,
        tags: Optional[list[TagRef]] = None,
    ) -> Post:
        """Create a stored post.

        The slug is derived from the title unless supplied. Reading time is
        always computed from the content. A post created as published gets
        the current time as its publication date unless one is supplied.

        Returns:
            The stored post, with tags

        Raises:
            ValidationError: If title or content is missing, or the slug is invalid
            ConflictError: If the slug is already taken
        """
        title = _require_text("title", title)
        content = _require_text("content", content)

        with logfire.span("post_service.create_post", title=title, slug=slug):
            new_post = NewPost(
                slug=parse_slug(slug) if slug else slug_from_title(title),
                title=title,
                description=description,
                content=content,
                featured=featured,
                published=published,
                published_at=_aware(published_at) or (utcnow() if published else None),
                reading_time=self._reading_time(content),
                cover_image=cover_image,
                author=author or self.blog_settings.default_author,
                tags=tags or [],
            )

            post_id = await self.post_repository.create(new_post)
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFoundError("post", str(post_id))

            logfire.info("Post created", post_id=post.id, slug=post.slug.root)
            return post

    async def update_post(self, post_id: PostId, patch: PostPatch) -> Post:
        """Apply a sparse update to a stored post.

        Derived fields follow the patch:
        - content changed: reading time recomputed
        - title changed without an explicit slug: slug regenerated
        - published switched on with no publication date yet: set to now

        An explicit ``published_at`` in the patch always wins.

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If a required field is cleared
            ConflictError: If the resulting slug is already taken
        """
        with logfire.span(
            "post_service.update_post", post_id=post_id, fields=sorted(patch.model_fields_set)
        ):
            current = await self.post_repository.find_by_id(post_id)
            if current is None:
                raise NotFoundError("post", str(post_id))

            derived: dict = {}

            if patch.is_set("slug") and patch.slug is None:
                raise ValidationError("Slug cannot be empty")

            if patch.is_set("title"):
                _require_text("title", patch.title)
                if not patch.is_set("slug") and patch.title != current.title:
                    derived["slug"] = slug_from_title(patch.title)

            if patch.is_set("content"):
                derived["reading_time"] = self._reading_time(
                    _require_text("content", patch.content)
                )

            for flag in ("featured", "published"):
                if patch.is_set(flag) and getattr(patch, flag) is None:
                    raise ValidationError(f"{flag.capitalize()} must be true or false")

            if patch.is_set("published_at"):
                derived["published_at"] = _aware(patch.published_at)

            if patch.is_set("author") and not patch.author:
                derived["author"] = self.blog_settings.default_author

            if (
                patch.published
                and not patch.is_set("published_at")
                and current.published_at is None
            ):
                derived["published_at"] = utcnow()

            if derived:
                patch = patch.with_changes(**derived)

            await self.post_repository.update(post_id, patch)
            updated = await self.post_repository.find_by_id(post_id)
            if updated is None:
                raise NotFoundError("post", str(post_id))

            logfire.info("Post updated", post_id=post_id, slug=updated.slug.root)
            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a stored post.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=post_id)

    async def delete_all_posts(self) -> int:
        """Delete every stored post.

        Returns:
            Number of posts deleted
        """
        with logfire.span("post_service.delete_all_posts"):
            deleted = await self.post_repository.delete_all()
            logfire.warn("All stored posts deleted", count=deleted)
            return deleted

    async def get_post_by_slug(self, slug: str) -> Post | None:
        """Get a stored post by slug.

        Args:
            slug: Post slug (values that cannot be stored slugs never match)

        Returns:
            Post if found, None otherwise
        """
        try:
            parsed = Slug(slug)
        except PydanticValidationError:
            return None
        return await self.post_repository.find_by_slug(parsed)

    async def get_all_posts(self) -> list[Post]:
        """Every stored post, newest first."""
        return await self.post_repository.find_all()

    async def get_published_posts(self) -> list[Post]:
        """Published stored posts, newest first."""
        return await self.post_repository.find_all(published_only=True)

    async def get_featured_posts(self, limit: int) -> list[Post]:
        """Published featured stored posts, newest first, at most ``limit``."""
        return await self.post_repository.find_all(
            published_only=True, featured_only=True, limit=limit
        )
