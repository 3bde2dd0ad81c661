"""Post aggregate stored in the relational store."""

from datetime import datetime, timezone
from typing import Any, Optional, Union

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.model.tag import Tag
from folio.domain.value import PostId, Slug

# A tag reference on write: an existing tag id, or a tag name
TagRef = Union[int, str]


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Post(DomainModel):
    """Post aggregate root.

    Mutable through the API, unlike file-backed posts.
    """

    id: PostId
    slug: Slug
    title: str = Field(min_length=1)
    description: Optional[str] = None
    content: str
    featured: bool = False
    published: bool = False
    published_at: Optional[datetime] = None
    reading_time: int = Field(default=1, ge=1)
    cover_image: Optional[str] = None
    author: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    tags: list[Tag] = Field(default_factory=list)

    @property
    def sort_date(self) -> datetime:
        """Date used for newest-first ordering."""
        return self.published_at or self.created_at


class NewPost(DomainModel):
    """Fully derived post ready to be inserted.

    Slug, reading time and publication date have already been computed.
    """

    slug: Slug
    title: str = Field(min_length=1)
    description: Optional[str] = None
    content: str
    featured: bool = False
    published: bool = False
    published_at: Optional[datetime] = None
    reading_time: int = Field(ge=1)
    cover_image: Optional[str] = None
    author: str
    tags: list[TagRef] = Field(default_factory=list)


class PostPatch(DomainModel):
    """Sparse update of a stored post.

    Only fields explicitly set on construction are applied; anything left
    out keeps its stored value. Passing ``None`` explicitly clears a nullable
    column.
    """

    slug: Optional[Slug] = None
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    featured: Optional[bool] = None
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    reading_time: Optional[int] = None
    cover_image: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[list[TagRef]] = None

    def is_set(self, field: str) -> bool:
        """Whether the field was supplied in this patch."""
        return field in self.model_fields_set

    def column_changes(self) -> dict[str, Any]:
        """Supplied column values, excluding the tag set."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "tags"
        }

    def with_changes(self, **changes: Any) -> "PostPatch":
        """Return a new patch with extra fields marked as set."""
        data = {name: getattr(self, name) for name in self.model_fields_set}
        data.update(changes)
        return PostPatch(**data)
