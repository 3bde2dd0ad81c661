"""Delete post use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from folio.domain.service import ContentResolver, PostService


class DeletePostRequest(BaseModel):
    """Delete post request."""

    slug: str


class DeletedPost(BaseModel):
    """Summary of a deleted post."""

    id: int
    slug: str
    title: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    deleted_post: DeletedPost = Field(alias="deletedPost")


class DeletePostUseCase:
    """Use case for deleting a stored post."""

    def __init__(self, post_service: PostService, content_resolver: ContentResolver) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            content_resolver: Unified read view
        """
        self.post_service = post_service
        self.content_resolver = content_resolver

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            ImmutablePostError: If the slug names a file-backed post
            NotFoundError: If the post does not exist
        """
        with logfire.span("delete_post.execute", slug=request.slug):
            post = await self.content_resolver.require_store_post(request.slug)
            await self.post_service.delete_post(post.id)

            return DeletePostResponse(
                message="Blog post deleted successfully",
                deleted_post=DeletedPost(id=post.id, slug=post.slug.root, title=post.title),
            )
