"""Get post use case."""

import logfire
from pydantic import BaseModel

from folio.domain.error import AuthenticationRequiredError, NotFoundError
from folio.domain.model import UnifiedPost
from folio.domain.service import ContentResolver


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str
    authenticated: bool = False


class GetPostResponse(BaseModel):
    """Get post response."""

    post: UnifiedPost


class GetPostUseCase:
    """Use case for retrieving a post by slug from either source."""

    def __init__(self, content_resolver: ContentResolver) -> None:
        """Initialize get post use case.

        Args:
            content_resolver: Unified read view
        """
        self.content_resolver = content_resolver

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request with slug and caller authentication state

        Returns:
            The post

        Raises:
            NotFoundError: If no source has the slug
            AuthenticationRequiredError: If the post is unpublished and the
                caller is anonymous
        """
        post = await self.content_resolver.get_post_by_slug(request.slug)
        if post is None:
            raise NotFoundError("post", request.slug, "Post not found")

        if not post.published and not request.authenticated:
            logfire.info("Anonymous request for unpublished post", slug=request.slug)
            raise AuthenticationRequiredError(
                "Authentication required to view unpublished posts"
            )

        return GetPostResponse(post=post)
