"""List featured posts use case."""

from pydantic import BaseModel, Field

from folio.config import BlogSettings
from folio.domain.model import UnifiedPost
from folio.domain.service import ContentResolver


class ListFeaturedPostsRequest(BaseModel):
    """List featured posts request."""

    limit: int | None = Field(default=None, ge=1, le=50)


class ListFeaturedPostsResponse(BaseModel):
    """List featured posts response."""

    posts: list[UnifiedPost]


class ListFeaturedPostsUseCase:
    """Use case for listing published featured posts."""

    def __init__(self, content_resolver: ContentResolver, blog_settings: BlogSettings) -> None:
        self.content_resolver = content_resolver
        self.blog_settings = blog_settings

    async def execute(self, request: ListFeaturedPostsRequest) -> ListFeaturedPostsResponse:
        """Featured posts newest first, capped at the configured limit by default."""
        limit = request.limit or self.blog_settings.featured_limit
        posts = await self.content_resolver.get_featured_posts(limit)
        return ListFeaturedPostsResponse(posts=posts)
