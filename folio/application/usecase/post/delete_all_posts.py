"""Delete all posts use case."""

import logfire
from pydantic import BaseModel

from folio.config import BlogSettings
from folio.domain.error import ValidationError
from folio.domain.service import PostService


class DeleteAllPostsRequest(BaseModel):
    """Delete all posts request."""

    confirmation: str | None = None  # Value of the X-Confirm-Delete-All header


class DeleteAllPostsResponse(BaseModel):
    """Delete all posts response."""

    message: str
    count: int


class DeleteAllPostsUseCase:
    """Use case for wiping every stored post.

    File-backed posts are untouched. Requires the exact confirmation value.
    """

    def __init__(self, post_service: PostService, blog_settings: BlogSettings) -> None:
        """Initialize delete all posts use case.

        Args:
            post_service: Post domain service
            blog_settings: Holds the expected confirmation value
        """
        self.post_service = post_service
        self.blog_settings = blog_settings

    async def execute(self, request: DeleteAllPostsRequest) -> DeleteAllPostsResponse:
        """Execute bulk delete flow.

        Raises:
            ValidationError: If the confirmation value is missing or wrong
        """
        expected = self.blog_settings.bulk_delete_confirmation
        if request.confirmation != expected:
            logfire.warn("Bulk delete attempted without confirmation")
            raise ValidationError(
                f"Bulk delete requires header X-Confirm-Delete-All: {expected}"
            )

        count = await self.post_service.delete_all_posts()
        return DeleteAllPostsResponse(message=f"Deleted {count} posts", count=count)
