"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.post import (
    CreatePostUseCase,
    DeleteAllPostsUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListFeaturedPostsUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from folio.application.usecase.status import GetStatusUseCase
from folio.application.usecase.tag import CreateTagUseCase, ListTagsUseCase
from folio.config import BlogSettings
from folio.domain.service import ContentResolver, PostService, TagService
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, content_resolver: ContentResolver
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(content_resolver=content_resolver)

    @provide(scope=Scope.REQUEST)
    def get_list_featured_posts_use_case(
        self, content_resolver: ContentResolver, blog_settings: BlogSettings
    ) -> ListFeaturedPostsUseCase:
        """Provide list featured posts use case."""
        return ListFeaturedPostsUseCase(
            content_resolver=content_resolver, blog_settings=blog_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, content_resolver: ContentResolver) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(content_resolver=content_resolver)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, content_resolver: ContentResolver
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, content_resolver=content_resolver
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, content_resolver: ContentResolver
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, content_resolver=content_resolver
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, content_resolver: ContentResolver
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, content_resolver=content_resolver
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_all_posts_use_case(
        self, post_service: PostService, blog_settings: BlogSettings
    ) -> DeleteAllPostsUseCase:
        """Provide bulk delete use case."""
        return DeleteAllPostsUseCase(post_service=post_service, blog_settings=blog_settings)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, content_resolver: ContentResolver) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(content_resolver=content_resolver)

    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    # Status use cases
    @provide(scope=Scope.REQUEST)
    def get_status_use_case(self, content_resolver: ContentResolver) -> GetStatusUseCase:
        """Provide status use case."""
        return GetStatusUseCase(content_resolver=content_resolver)
