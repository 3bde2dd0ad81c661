"""Domain value objects for Folio."""

from folio.domain.value.identifiers import PostId, TagId
from folio.domain.value.types import ContentSource, Slug, TagSlug

__all__ = [
    # Identifiers
    "PostId",
    "TagId",
    # Types
    "ContentSource",
    "Slug",
    "TagSlug",
]
