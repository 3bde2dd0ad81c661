"""List tags use case."""

import logfire
from pydantic import BaseModel

from folio.domain.model import UnifiedTag
from folio.domain.service import ContentResolver


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[UnifiedTag]


class ListTagsUseCase:
    """Use case for listing tags from both content sources."""

    def __init__(self, content_resolver: ContentResolver) -> None:
        """Initialize list tags use case.

        Args:
            content_resolver: Unified read view
        """
        self.content_resolver = content_resolver

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            Stored tags merged with tags named by file-backed posts
        """
        with logfire.span("list_tags.execute"):
            tags = await self.content_resolver.get_all_tags()
            logfire.info("Tags listed", count=len(tags))
            return ListTagsResponse(tags=tags)
