"""Read model shared by file-backed and stored posts."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from folio.domain.value import ContentSource


class UnifiedTag(BaseModel):
    """Tag as exposed to readers, whatever its origin."""

    id: Optional[int] = None
    name: str
    slug: str
    description: Optional[str] = None
    color: str
    source: ContentSource


class UnifiedPost(BaseModel):
    """Post as exposed to readers, whatever its origin.

    File-backed posts have no id and are published unless drafted.
    """

    id: Optional[int] = None
    slug: str
    title: str
    description: Optional[str] = None
    content: str
    featured: bool
    published: bool
    published_at: Optional[datetime] = None
    reading_time: int
    cover_image: Optional[str] = None
    author: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tags: list[UnifiedTag] = Field(default_factory=list)
    source: ContentSource

    @property
    def sort_date(self) -> Optional[datetime]:
        """Date used for newest-first ordering."""
        return self.published_at or self.created_at
