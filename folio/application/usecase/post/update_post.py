"""Update post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from folio.domain.model import PostPatch, UnifiedPost
from folio.domain.service import ContentResolver, PostService, StoreSourced
from folio.domain.service.post_service import parse_slug


class PostChanges(BaseModel):
    """Sparse set of post fields to change.

    Only fields present in the payload are applied.
    """

    slug: str | None = None
    title: str | None = None
    description: str | None = None
    content: str | None = None
    featured: bool | None = None
    published: bool | None = None
    published_at: datetime | None = None
    cover_image: str | None = None
    author: str | None = None
    tags: list[int | str] | None = None

    def to_patch(self) -> PostPatch:
        """Domain patch carrying exactly the supplied fields."""
        data = {name: getattr(self, name) for name in self.model_fields_set}
        if data.get("slug") is not None:
            data["slug"] = parse_slug(data["slug"])
        return PostPatch(**data)


class UpdatePostRequest(BaseModel):
    """Update post request."""

    slug: str  # Current slug of the post
    changes: PostChanges


class UpdatePostResponse(BaseModel):
    """Update post response."""

    message: str
    post: UnifiedPost


class UpdatePostUseCase:
    """Use case for updating a stored post."""

    def __init__(self, post_service: PostService, content_resolver: ContentResolver) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            content_resolver: Unified read view
        """
        self.post_service = post_service
        self.content_resolver = content_resolver

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Current slug and the fields to change

        Returns:
            The post as stored after the update (under its new slug if changed)

        Raises:
            ImmutablePostError: If the slug names a file-backed post
            NotFoundError: If the post does not exist
            ValidationError: If a supplied value is invalid
            ConflictError: If the new slug is already taken
        """
        with logfire.span(
            "update_post.execute",
            slug=request.slug,
            fields=sorted(request.changes.model_fields_set),
        ):
            current = await self.content_resolver.require_store_post(request.slug)
            updated = await self.post_service.update_post(
                current.id, request.changes.to_patch()
            )

            return UpdatePostResponse(
                message="Blog post updated successfully",
                post=self.content_resolver.normalize(StoreSourced(updated)),
            )
