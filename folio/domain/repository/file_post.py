"""File-backed post source interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.file_post import FilePost


class FilePostRepository(ABC):
    """Read-only source of posts authored as files.

    Lookups never raise for missing or unreadable documents; they report
    absence instead.
    """

    @abstractmethod
    def list_posts(self) -> list[FilePost]:
        """Non-draft posts, newest first by date."""
        pass

    @abstractmethod
    def get_by_slug(self, slug: str) -> Optional[FilePost]:
        """Post for the given slug (drafts included), or None."""
        pass

    @abstractmethod
    def list_slugs(self) -> list[str]:
        """Slugs of every document, draft or not."""
        pass
