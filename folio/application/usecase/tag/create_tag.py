"""Create tag use case."""

import logfire
from pydantic import BaseModel

from folio.domain.model import UnifiedTag
from folio.domain.service import TagService
from folio.domain.value import ContentSource


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str | None = None
    description: str | None = None
    color: str | None = None


class CreateTagResponse(BaseModel):
    """Create tag response."""

    message: str
    tag: UnifiedTag


class CreateTagUseCase:
    """Use case for creating a stored tag."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Raises:
            ValidationError: If the name is missing
            ConflictError: If the tag already exists
        """
        with logfire.span("create_tag.execute", name=request.name):
            tag = await self.tag_service.create_tag(
                name=request.name,
                description=request.description,
                color=request.color,
            )

            return CreateTagResponse(
                message="Tag created successfully",
                tag=UnifiedTag(
                    id=tag.id,
                    name=tag.name,
                    slug=tag.slug.root,
                    description=tag.description,
                    color=tag.color,
                    source=ContentSource.DATABASE,
                ),
            )
