"""Unit tests for PostService."""

from datetime import datetime, timezone

import pytest

from folio.domain.error import ConflictError, NotFoundError, ValidationError
from folio.domain.model import PostPatch
from folio.domain.repository import PostRepository
from folio.domain.service import PostService
from folio.domain.value import PostId, Slug
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_derives_slug_reading_time_and_author(self, unit_env):
        """Missing slug, author and reading time are filled in."""
        service = await unit_env.get(PostService)

        post = await service.create_post(
            title="Hello, World!!", content="word " * 450
        )

        assert post.slug == Slug("hello-world")
        assert post.reading_time == 3
        assert post.author == "Editor"
        assert post.published is False
        assert post.published_at is None

    @pytest.mark.asyncio
    async def test_supplied_slug_is_kept(self, unit_env):
        service = await unit_env.get(PostService)

        post = await service.create_post(title="Anything", content="x", slug="custom-slug")

        assert post.slug.root == "custom-slug"

    @pytest.mark.asyncio
    async def test_invalid_supplied_slug_rejected(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="Invalid slug"):
            await service.create_post(title="Anything", content="x", slug="Not A Slug")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content", [(None, "body"), ("   ", "body"), ("Title", None), ("Title", "")]
    )
    async def test_title_and_content_required(self, unit_env, title, content):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="required"):
            await service.create_post(title=title, content=content)

    @pytest.mark.asyncio
    async def test_title_without_slug_characters_rejected(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await service.create_post(title="!!!", content="body")

    @pytest.mark.asyncio
    async def test_published_on_create_sets_published_at(self, unit_env):
        service = await unit_env.get(PostService)
        before = datetime.now(timezone.utc)

        post = await service.create_post(title="Live", content="body", published=True)

        assert post.published_at is not None
        assert post.published_at >= before

    @pytest.mark.asyncio
    async def test_explicit_published_at_wins(self, unit_env):
        service = await unit_env.get(PostService)
        when = datetime(2023, 3, 1, 9, 30)

        post = await service.create_post(
            title="Backdated", content="body", published=True, published_at=when
        )

        assert post.published_at == when.replace(tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_duplicate_slug_conflicts_and_keeps_original(self, unit_env):
        """A colliding slug fails and the existing post is unchanged."""
        service = await unit_env.get(PostService)
        original = await service.create_post(title="Same Title", content="first")

        with pytest.raises(ConflictError, match="already exists"):
            await service.create_post(title="Same title", content="second")

        stored = await service.get_post_by_slug("same-title")
        assert stored.id == original.id
        assert stored.content == "first"
        assert len(await service.get_all_posts()) == 1

    @pytest.mark.asyncio
    async def test_tags_by_name_and_id(self, unit_env):
        """Named tags are created on demand; ids must already exist."""
        service = await unit_env.get(PostService)
        first = await service.create_post(title="One", content="x", tags=["Python"])
        python_id = first.tags[0].id

        second = await service.create_post(
            title="Two", content="x", tags=[python_id, "Web Dev", "python"]
        )

        assert sorted(t.name for t in second.tags) == ["Python", "Web Dev"]
        assert {t.slug.root for t in second.tags} == {"python", "web-dev"}

    @pytest.mark.asyncio
    async def test_unknown_tag_id_rejected_without_creating_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="Tag not found"):
            await service.create_post(title="Orphan", content="x", tags=[999])

        assert await service.get_post_by_slug("orphan") is None


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_description_only_patch_leaves_rest_unchanged(self, unit_env):
        """Sparse patch: untouched fields keep their values."""
        service = await unit_env.get(PostService)
        post = await service.create_post(
            title="Stable", content="word " * 500, tags=["keep"]
        )

        updated = await service.update_post(post.id, PostPatch(description="New blurb"))

        assert updated.description == "New blurb"
        assert updated.title == post.title
        assert updated.content == post.content
        assert updated.reading_time == post.reading_time
        assert [t.name for t in updated.tags] == ["keep"]
        assert updated.slug == post.slug

    @pytest.mark.asyncio
    async def test_content_change_recomputes_reading_time(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Grow", content="short")

        updated = await service.update_post(post.id, PostPatch(content="word " * 1000))

        assert updated.reading_time == 5

    @pytest.mark.asyncio
    async def test_title_change_regenerates_slug(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Old Name", content="x")

        updated = await service.update_post(post.id, PostPatch(title="New Name"))

        assert updated.slug.root == "new-name"

    @pytest.mark.asyncio
    async def test_explicit_slug_wins_over_title(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Old Name", content="x")

        updated = await service.update_post(
            post.id, PostPatch(title="New Name", slug=Slug("kept-slug"))
        )

        assert updated.slug.root == "kept-slug"

    @pytest.mark.asyncio
    async def test_publishing_sets_published_at_once(self, unit_env):
        """First publish stamps published_at; republishing leaves it alone."""
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Draft", content="x")

        published = await service.update_post(post.id, PostPatch(published=True))
        assert published.published_at is not None

        unpublished = await service.update_post(post.id, PostPatch(published=False))
        republished = await service.update_post(post.id, PostPatch(published=True))

        assert unpublished.published_at == published.published_at
        assert republished.published_at == published.published_at

    @pytest.mark.asyncio
    async def test_explicit_published_at_in_patch_wins(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Draft", content="x")
        when = datetime(2022, 1, 1, tzinfo=timezone.utc)

        updated = await service.update_post(
            post.id, PostPatch(published=True, published_at=when)
        )

        assert updated.published_at == when

    @pytest.mark.asyncio
    async def test_tags_replaced_when_supplied(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Tagged", content="x", tags=["a", "b"])

        updated = await service.update_post(post.id, PostPatch(tags=["c"]))

        assert [t.name for t in updated.tags] == ["c"]

    @pytest.mark.asyncio
    async def test_slug_collision_conflicts(self, unit_env):
        service = await unit_env.get(PostService)
        await service.create_post(title="Taken", content="x")
        other = await service.create_post(title="Other", content="x")

        with pytest.raises(ConflictError):
            await service.update_post(other.id, PostPatch(slug=Slug("taken")))

    @pytest.mark.asyncio
    async def test_clearing_title_rejected(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Named", content="x")

        with pytest.raises(ValidationError):
            await service.update_post(post.id, PostPatch(title=""))

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.update_post(PostId(404), PostPatch(title="Ghost"))


class TestDeletePost:
    """Tests for delete_post and delete_all_posts."""

    @pytest.mark.asyncio
    async def test_delete_then_delete_again(self, unit_env):
        """Deleted posts are gone; deleting twice fails."""
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Short lived", content="x")

        await service.delete_post(post.id)

        assert await service.get_post_by_slug("short-lived") is None
        with pytest.raises(NotFoundError):
            await service.delete_post(post.id)

    @pytest.mark.asyncio
    async def test_delete_all_returns_count(self, unit_env):
        service = await unit_env.get(PostService)
        repository = await unit_env.get(PostRepository)
        for title in ("One", "Two", "Three"):
            await service.create_post(title=title, content="x")

        assert await service.delete_all_posts() == 3
        assert await repository.count() == 0


class TestListing:
    """Tests for the listing helpers."""

    @pytest.mark.asyncio
    async def test_published_and_featured_filters(self, unit_env):
        service = await unit_env.get(PostService)
        await service.create_post(title="Draft", content="x")
        await service.create_post(title="Live", content="x", published=True)
        await service.create_post(
            title="Star", content="x", published=True, featured=True
        )
        await service.create_post(title="Hidden Star", content="x", featured=True)

        published = await service.get_published_posts()
        featured = await service.get_featured_posts(limit=3)

        assert {p.title for p in published} == {"Live", "Star"}
        assert [p.title for p in featured] == ["Star"]

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        service = await unit_env.get(PostService)
        await service.create_post(
            title="Older",
            content="x",
            published=True,
            published_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
        )
        await service.create_post(
            title="Newer",
            content="x",
            published=True,
            published_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        posts = await service.get_all_posts()

        assert [p.title for p in posts] == ["Newer", "Older"]

    @pytest.mark.asyncio
    async def test_get_post_by_invalid_slug_is_none(self, unit_env):
        service = await unit_env.get(PostService)

        assert await service.get_post_by_slug("Not A Slug") is None


class TestReservedSlugs:
    """Slugs naming listing routes under /blog cannot be stored."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["Featured", "Tags", "  tags!  "])
    async def test_title_deriving_reserved_slug(self, unit_env, title):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="reserved"):
            await service.create_post(title=title, content="Body")

    @pytest.mark.asyncio
    async def test_explicit_reserved_slug(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="reserved"):
            await service.create_post(title="Anything", content="Body", slug="featured")

    @pytest.mark.asyncio
    async def test_retitle_to_reserved_slug(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(title="Plain", content="Body")

        with pytest.raises(ValidationError, match="reserved"):
            await service.update_post(post.id, PostPatch(title="Featured"))

        assert (await service.get_post_by_slug("plain")) is not None

    @pytest.mark.asyncio
    async def test_slug_containing_reserved_word(self, unit_env):
        service = await unit_env.get(PostService)

        post = await service.create_post(title="Featured Projects", content="Body")

        assert post.slug.root == "featured-projects"
