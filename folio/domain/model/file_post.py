"""Post read from a markdown document on disk."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel


class FilePost(DomainModel):
    """File-backed post.

    Read-only: created, edited and deleted on disk, never through the API.
    Identified only by its slug (the document basename).
    """

    slug: str
    title: str = ""
    date: Optional[datetime] = None
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    featured: bool = False
    draft: bool = False
    content: str = ""
    author: Optional[str] = None
    cover_image: Optional[str] = None
