"""Tag entity for categorizing posts."""

from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import TagId, TagSlug


class Tag(DomainModel):
    """Tag entity stored in the relational store.

    Tags are shared between posts (many-to-many). Both name and slug are
    unique across all tags.
    """

    id: TagId
    name: str = Field(min_length=1, max_length=100)
    slug: TagSlug
    description: Optional[str] = None
    color: str


class NewTag(DomainModel):
    """A tag that has not been stored yet."""

    name: str = Field(min_length=1, max_length=100)
    slug: TagSlug
    description: Optional[str] = None
    color: str
