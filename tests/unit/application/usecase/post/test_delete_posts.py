"""Unit tests for the delete use cases."""

import pytest

from folio.config import Settings
from folio.application.usecase.post import (
    DeleteAllPostsRequest,
    DeleteAllPostsUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from folio.domain.error import ImmutablePostError, NotFoundError, ValidationError
from folio.domain.service import PostService
from tests.conftest import write_document
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePost:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reports_removed_post(self, unit_env):
        posts = await unit_env.get(PostService)
        use_case = await unit_env.get(DeletePostUseCase)
        created = await posts.create_post(title="Short Lived", content="Body")

        response = await use_case.execute(DeletePostRequest(slug="short-lived"))

        assert response.message == "Blog post deleted successfully"
        assert response.deleted_post.id == created.id
        assert response.deleted_post.slug == "short-lived"
        assert response.deleted_post.title == "Short Lived"
        assert await posts.get_post_by_slug("short-lived") is None

    @pytest.mark.asyncio
    async def test_second_delete_not_found(self, unit_env):
        posts = await unit_env.get(PostService)
        use_case = await unit_env.get(DeletePostUseCase)
        await posts.create_post(title="Once", content="Body")
        await use_case.execute(DeletePostRequest(slug="once"))

        with pytest.raises(NotFoundError):
            await use_case.execute(DeletePostRequest(slug="once"))

    @pytest.mark.asyncio
    async def test_file_backed_post_cannot_be_deleted(self, unit_env):
        settings = await unit_env.get(Settings)
        use_case = await unit_env.get(DeletePostUseCase)
        path = write_document(settings.content.root, "permanent", title="Permanent")

        with pytest.raises(ImmutablePostError):
            await use_case.execute(DeletePostRequest(slug="permanent"))

        assert path.exists()


class TestDeleteAllPosts:
    """Tests for DeleteAllPostsUseCase."""

    @pytest.mark.asyncio
    async def test_requires_exact_confirmation(self, unit_env):
        posts = await unit_env.get(PostService)
        use_case = await unit_env.get(DeleteAllPostsUseCase)
        await posts.create_post(title="Survivor", content="Body")

        for confirmation in (None, "yes", "YES-DELETE-ALL-POSTS"):
            with pytest.raises(ValidationError, match="X-Confirm-Delete-All"):
                await use_case.execute(DeleteAllPostsRequest(confirmation=confirmation))

        assert len(await posts.get_all_posts()) == 1

    @pytest.mark.asyncio
    async def test_deletes_stored_posts_only(self, unit_env):
        """File-backed posts remain listed after a wipe."""
        settings = await unit_env.get(Settings)
        posts = await unit_env.get(PostService)
        use_case = await unit_env.get(DeleteAllPostsUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        write_document(settings.content.root, "from-disk", title="From disk")
        await posts.create_post(title="One", content="Body", tags=["kept"])
        await posts.create_post(title="Two", content="Body")

        response = await use_case.execute(
            DeleteAllPostsRequest(confirmation=settings.blog.bulk_delete_confirmation)
        )
        remaining = await list_posts.execute(
            ListPostsRequest(include_unpublished=True, authenticated=True)
        )

        assert response.count == 2
        assert response.message == "Deleted 2 posts"
        assert [p.slug for p in remaining.posts] == ["from-disk"]
