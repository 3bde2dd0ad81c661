"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from folio.domain.value.common import RootValueObject


class ContentSource(str, Enum):
    """Where a post is stored."""

    DATABASE = "database"
    FILE = "file"


class Slug(RootValueObject[str]):
    """URL-safe slug for stored posts.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'hello-world', 'notes-on-sqlalchemy-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v


class TagSlug(RootValueObject[str]):
    """Slug derived from a tag name.

    Looser than a post slug: any non-empty run of ``[a-z0-9-]``.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_slug(cls, v: str) -> str:
        """Validate tag slug characters."""
        if not re.match(r"^[a-z0-9-]+$", v):
            raise ValueError("Tag slug must be non-empty and contain only a-z, 0-9 and '-'")
        return v
