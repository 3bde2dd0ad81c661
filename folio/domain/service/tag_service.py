"""Tag domain service."""

from typing import Optional

import logfire

from folio.config import BlogSettings
from folio.domain.error import NotFoundError, ValidationError
from folio.domain.model.tag import NewTag, Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import TagSlug
from folio.util.text import generate_tag_slug

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository, blog_settings: BlogSettings) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            blog_settings: Blog defaults (tag color)
        """
        self.tag_repository = tag_repository
        self.blog_settings = blog_settings

    async def get_all_tags(self) -> list[Tag]:
        """Get all stored tags ordered by name."""
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def create_tag(
        self,
        name: Optional[str],
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Tag:
        """Create a tag.

        Args:
            name: Display name, also the source of the slug
            description: Optional description
            color: Display color (defaults to the configured tag color)

        Returns:
            The stored tag

        Raises:
            ValidationError: If the name is blank or yields an empty slug
            ConflictError: If the name or slug is already taken
        """
        if name is None or not name.strip():
            raise ValidationError("Tag name is required")
        name = name.strip()

        slug = generate_tag_slug(name)
        if not slug:
            raise ValidationError(f"Tag name must contain at least one letter or digit: {name!r}")

        with logfire.span("tag_service.create_tag", name=name, slug=slug):
            tag_id = await self.tag_repository.create(
                NewTag(
                    name=name,
                    slug=TagSlug(slug),
                    description=description,
                    color=color or self.blog_settings.default_tag_color,
                )
            )
            tag = await self.tag_repository.find_by_id(tag_id)
            if tag is None:
                raise NotFoundError("tag", str(tag_id))
            return tag
