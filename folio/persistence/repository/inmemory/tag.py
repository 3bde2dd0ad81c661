"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from folio.domain.error import ConflictError
from folio.domain.model.tag import NewTag, Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import TagId

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        """Initialize repository over shared (or fresh) in-memory tables."""
        self._db = database or InMemoryDatabase()

    async def create(self, tag: NewTag) -> TagId:
        """Insert a tag."""
        for existing in self._db.tags.values():
            if existing.name == tag.name or existing.slug == tag.slug:
                raise ConflictError("tag", "name", tag.name)

        tag_id = TagId(self._db.allocate_tag_id())
        self._db.tags[tag_id] = Tag(
            id=tag_id,
            name=tag.name,
            slug=tag.slug,
            description=tag.description,
            color=tag.color,
        )
        return tag_id

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._db.tags.get(tag_id)

    async def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by name."""
        for tag in self._db.tags.values():
            if tag.name == name:
                return tag
        return None

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        return sorted(self._db.tags.values(), key=lambda t: t.name)
