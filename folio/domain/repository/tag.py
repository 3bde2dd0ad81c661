"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.tag import NewTag, Tag
from folio.domain.value import TagId


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def create(self, tag: NewTag) -> TagId:
        """Insert a tag.

        Args:
            tag: Tag to store

        Returns:
            The id assigned by the store

        Raises:
            ConflictError: If the name or slug is already taken
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name.

        Returns:
            List of tags
        """
        pass
