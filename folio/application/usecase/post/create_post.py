"""Create post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from folio.domain.model import UnifiedPost
from folio.domain.service import ContentResolver, PostService, StoreSourced


class CreatePostRequest(BaseModel):
    """Create post request.

    Title and content are required; they are optional here so a missing
    field surfaces as a domain validation error.
    """

    title: str | None = None
    content: str | None = None
    slug: str | None = None
    description: str | None = None
    featured: bool = False
    published: bool = False
    published_at: datetime | None = None
    cover_image: str | None = None
    author: str | None = None
    tags: list[int | str] | None = None  # Tag ids or tag names


class CreatePostResponse(BaseModel):
    """Create post response."""

    message: str
    post: UnifiedPost


class CreatePostUseCase:
    """Use case for creating a stored post."""

    def __init__(self, post_service: PostService, content_resolver: ContentResolver) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            content_resolver: Unified read view, used to shape the response
        """
        self.post_service = post_service
        self.content_resolver = content_resolver

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If title or content is missing, or the slug is invalid
            ConflictError: If the slug is already taken
        """
        with logfire.span("create_post.execute", title=request.title, slug=request.slug):
            post = await self.post_service.create_post(
                title=request.title,
                content=request.content,
                slug=request.slug,
                description=request.description,
                featured=request.featured,
                published=request.published,
                published_at=request.published_at,
                cover_image=request.cover_image,
                author=request.author,
                tags=request.tags,
            )

            return CreatePostResponse(
                message="Blog post created successfully",
                post=self.content_resolver.normalize(StoreSourced(post)),
            )
