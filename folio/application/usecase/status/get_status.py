"""Get status use case."""

from datetime import datetime
from typing import Literal, Optional

import logfire
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from folio.domain.model import utcnow
from folio.domain.service import ContentResolver


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlogStats(_CamelModel):
    """Relational store counts."""

    total_posts: int = 0
    published_posts: int = 0
    featured_posts: int = 0
    total_tags: int = 0


class ContentStatsItem(_CamelModel):
    """Counts over stored and file-backed posts together."""

    file_posts: int = 0
    total_posts: int = 0
    published_posts: int = 0
    featured_posts: int = 0
    total_tags: int = 0


class GetStatusRequest(BaseModel):
    """Get status request."""

    authenticated: bool = False


class GetStatusResponse(BaseModel):
    """Get status response."""

    timestamp: datetime
    authenticated: bool
    database: Literal["connected", "error"]
    blog: BlogStats
    content: Optional[ContentStatsItem] = None


class GetStatusUseCase:
    """Use case for reporting API status and content counts.

    A failing store is reported in the payload instead of failing the request.
    """

    def __init__(self, content_resolver: ContentResolver) -> None:
        self.content_resolver = content_resolver

    async def execute(self, request: GetStatusRequest) -> GetStatusResponse:
        """Execute status flow."""
        timestamp = utcnow()
        try:
            stats = await self.content_resolver.get_stats()
        except Exception as e:
            logfire.error(
                "Database error in status check",
                error=str(e),
                error_type=type(e).__name__,
            )
            return GetStatusResponse(
                timestamp=timestamp,
                authenticated=request.authenticated,
                database="error",
                blog=BlogStats(),
            )

        return GetStatusResponse(
            timestamp=timestamp,
            authenticated=request.authenticated,
            database="connected",
            blog=BlogStats(**stats.store.model_dump()),
            content=ContentStatsItem(**stats.merged.model_dump()),
        )
