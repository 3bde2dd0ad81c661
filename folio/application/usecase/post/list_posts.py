"""List posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from folio.domain.error import AuthenticationRequiredError
from folio.domain.model import UnifiedPost
from folio.domain.service import ContentResolver


class ListPostsRequest(BaseModel):
    """List posts request."""

    include_unpublished: bool = False
    authenticated: bool = False
    tag: Optional[str] = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[UnifiedPost]


class ListPostsUseCase:
    """Use case for listing posts from both content sources."""

    def __init__(self, content_resolver: ContentResolver) -> None:
        """Initialize list posts use case.

        Args:
            content_resolver: Unified read view
        """
        self.content_resolver = content_resolver

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request

        Returns:
            Posts newest first; unpublished posts only when asked for by an
            authenticated caller. A tag narrows them to posts
            carrying the tag with that slug

        Raises:
            AuthenticationRequiredError: If unpublished posts are requested anonymously
        """
        with logfire.span(
            "list_posts.execute",
            include_unpublished=request.include_unpublished,
            tag=request.tag,
        ):
            if request.include_unpublished:
                if not request.authenticated:
                    raise AuthenticationRequiredError(
                        "Authentication required to list unpublished posts"
                    )
                posts = await self.content_resolver.get_all_posts(tag_slug=request.tag)
            else:
                posts = await self.content_resolver.get_published_posts(tag_slug=request.tag)

            return ListPostsResponse(posts=posts)
