"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import AuthSettings, BlogSettings
from folio.domain.repository import FilePostRepository, PostRepository, TagRepository
from folio.domain.service import AuthService, ContentResolver, PostService, TagService
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, auth_settings: AuthSettings) -> AuthService:
        """Provide admin credential check service."""
        return AuthService(auth_settings=auth_settings)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, blog_settings: BlogSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, blog_settings=blog_settings)

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, blog_settings: BlogSettings
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository, blog_settings=blog_settings)

    @provide
    def get_content_resolver(
        self,
        post_repository: PostRepository,
        tag_repository: TagRepository,
        file_posts: FilePostRepository,
        blog_settings: BlogSettings,
    ) -> ContentResolver:
        """Provide the unified read view over both content sources."""
        return ContentResolver(
            post_repository=post_repository,
            tag_repository=tag_repository,
            file_posts=file_posts,
            blog_settings=blog_settings,
        )
