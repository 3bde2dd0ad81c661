"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.post import NewPost, Post, PostPatch
from folio.domain.value import PostId, Slug


class PostRepository(ABC):
    """Repository for the stored Post aggregate.

    Implementations must apply a post row and its tag associations as one
    atomic unit, and must report unique-key collisions as ConflictError.
    """

    @abstractmethod
    async def create(self, post: NewPost) -> PostId:
        """Insert a post and associate its tags.

        Tag references are tag ids (must exist) or tag names (created when
        missing).

        Args:
            post: Fully derived post

        Returns:
            The id assigned by the store

        Raises:
            ConflictError: If the slug is already taken
            ValidationError: If a referenced tag id does not exist
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, with its tags.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug, with its tags.

        Args:
            slug: The post's slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        published_only: bool = False,
        featured_only: bool = False,
        limit: Optional[int] = None,
        tag_slug: Optional[str] = None,
    ) -> List[Post]:
        """Find posts newest first by published_at, falling back to created_at.

        Args:
            published_only: Only return published posts
            featured_only: Only return featured posts
            tag_slug: Only return posts carrying the tag with this slug
            limit: Maximum number of posts to return (None for all)

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        published_only: bool = False,
        featured_only: bool = False,
    ) -> int:
        """Count posts matching the given filters.

        Args:
            published_only: Only count published posts
            featured_only: Only count featured posts

        Returns:
            Number of posts
        """
        pass

    @abstractmethod
    async def update(self, post_id: PostId, patch: PostPatch) -> None:
        """Apply a sparse patch to a post.

        Only fields set on the patch are written. When the tag set is part
        of the patch it replaces the existing associations.

        Args:
            post_id: ID of the post to update
            patch: Fields to change

        Raises:
            NotFoundError: If the post does not exist
            ConflictError: If the new slug is already taken
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its tag associations.

        Args:
            post_id: The post ID to delete

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every post.

        Returns:
            Number of posts deleted
        """
        pass
