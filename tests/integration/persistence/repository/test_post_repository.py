"""Integration tests for the PostgreSQL post and tag repositories.

These tests verify that writes are atomic against a real database: unique
constraints surface as domain errors and a failed write leaves no rows
behind.
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.error import ConflictError, NotFoundError, ValidationError
from folio.domain.model import NewPost, NewTag, PostPatch
from folio.domain.repository import PostRepository, TagRepository
from folio.domain.value import PostId, Slug, TagId, TagSlug
from tests.harness import create_db_env_fixture

# Integration test fixture
integration_env = create_db_env_fixture()


def new_post(slug: str, **fields) -> NewPost:
    values = {
        "title": slug.replace("-", " ").title(),
        "content": "Body",
        "reading_time": 1,
        "author": "Editor",
    }
    values.update(fields)
    return NewPost(slug=Slug(slug), **values)


class TestPostRepositoryIntegration:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_with_tags(self, integration_env):
        """Named tags are created on first use and loaded back with the post."""
        # Arrange
        repo = await integration_env.get(PostRepository)

        # Act
        post_id = await repo.create(new_post("itest-tagged", tags=["Itest Alpha", "itest beta"]))
        found = await repo.find_by_id(post_id)

        # Assert
        assert found is not None
        assert found.slug.root == "itest-tagged"
        assert [t.slug.root for t in found.tags] == ["itest-alpha", "itest-beta"]

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_conflict(self, integration_env):
        """A second insert with the same slug raises ConflictError, not IntegrityError."""
        # Arrange
        repo = await integration_env.get(PostRepository)
        await repo.create(new_post("itest-duplicate"))

        # Act / Assert
        with pytest.raises(ConflictError):
            await repo.create(new_post("itest-duplicate", title="Again"))

        # The session is still usable after the failed savepoint
        assert await repo.find_by_slug(Slug("itest-duplicate")) is not None

    @pytest.mark.asyncio
    async def test_unknown_tag_id_rolls_back_post(self, integration_env):
        """A post referencing a missing tag id is not left behind."""
        # Arrange
        repo = await integration_env.get(PostRepository)

        # Act
        with pytest.raises(ValidationError, match="Tag not found"):
            await repo.create(new_post("itest-orphan", tags=[TagId(2_000_000_000)]))

        # Assert
        assert await repo.find_by_slug(Slug("itest-orphan")) is None

    @pytest.mark.asyncio
    async def test_rename_onto_taken_slug_is_conflict(self, integration_env):
        repo = await integration_env.get(PostRepository)
        await repo.create(new_post("itest-taken"))
        other = await repo.create(new_post("itest-other"))

        with pytest.raises(ConflictError):
            await repo.update(other, PostPatch(slug=Slug("itest-taken")))

        assert (await repo.find_by_id(other)).slug.root == "itest-other"

    @pytest.mark.asyncio
    async def test_update_replaces_tags(self, integration_env):
        repo = await integration_env.get(PostRepository)
        post_id = await repo.create(new_post("itest-retag", tags=["itest old"]))

        await repo.update(post_id, PostPatch(tags=["itest new"]))

        found = await repo.find_by_id(post_id)
        assert [t.name for t in found.tags] == ["itest new"]

    @pytest.mark.asyncio
    async def test_update_missing_post(self, integration_env):
        repo = await integration_env.get(PostRepository)

        with pytest.raises(NotFoundError):
            await repo.update(PostId(2_000_000_000), PostPatch(title="Nobody"))

    @pytest.mark.asyncio
    async def test_repeat_delete_is_not_found(self, integration_env):
        """Deleting twice raises NotFoundError the second time."""
        # Arrange
        repo = await integration_env.get(PostRepository)
        post_id = await repo.create(new_post("itest-delete", tags=["itest gone"]))

        # Act
        await repo.delete(post_id)

        # Assert
        assert await repo.find_by_id(post_id) is None
        with pytest.raises(NotFoundError):
            await repo.delete(post_id)

    @pytest.mark.asyncio
    async def test_find_all_orders_by_publication_then_creation(self, integration_env):
        """Unpublished posts sort by creation time among published ones."""
        # Arrange
        repo = await integration_env.get(PostRepository)
        await repo.create(
            new_post(
                "itest-old",
                published=True,
                published_at=datetime(1990, 1, 1, tzinfo=timezone.utc),
            )
        )
        await repo.create(new_post("itest-draft"))
        await repo.create(
            new_post(
                "itest-future",
                published=True,
                published_at=datetime(2999, 1, 1, tzinfo=timezone.utc),
            )
        )

        # Act
        slugs = [p.slug.root for p in await repo.find_all() if p.slug.root.startswith("itest-")]
        published = [
            p.slug.root
            for p in await repo.find_all(published_only=True)
            if p.slug.root.startswith("itest-")
        ]

        # Assert
        assert slugs == ["itest-future", "itest-draft", "itest-old"]
        assert published == ["itest-future", "itest-old"]

    @pytest.mark.asyncio
    async def test_find_all_by_tag_slug(self, integration_env):
        repo = await integration_env.get(PostRepository)
        await repo.create(new_post("itest-in", published=True, tags=["Itest Filter"]))
        await repo.create(new_post("itest-out", published=True))
        await repo.create(new_post("itest-hidden", tags=["Itest Filter"]))

        published = await repo.find_all(published_only=True, tag_slug="itest-filter")
        everything = await repo.find_all(tag_slug="itest-filter")

        assert [p.slug.root for p in published] == ["itest-in"]
        assert {p.slug.root for p in everything} == {"itest-in", "itest-hidden"}

    @pytest.mark.asyncio
    async def test_delete_all_counts_rows(self, integration_env):
        # Arrange
        repo = await integration_env.get(PostRepository)
        before = await repo.count()
        await repo.create(new_post("itest-bulk-1", tags=["itest bulk"]))
        await repo.create(new_post("itest-bulk-2"))

        # Act
        deleted = await repo.delete_all()

        # Assert
        assert deleted == before + 2
        assert await repo.count() == 0
        assert await repo.find_all() == []


class TestTagResolutionIntegration:
    """Tag creation under unique constraints."""

    @pytest.mark.asyncio
    async def test_duplicate_tag_is_conflict(self, integration_env):
        tags = await integration_env.get(TagRepository)
        await tags.create(NewTag(name="Itest Dup", slug=TagSlug("itest-dup"), color="#000000"))

        with pytest.raises(ConflictError):
            await tags.create(
                NewTag(name="Itest Dup", slug=TagSlug("itest-dup-2"), color="#000000")
            )

    @pytest.mark.asyncio
    async def test_tag_created_concurrently_is_reused(self, integration_env, monkeypatch):
        """A tag inserted between lookup and insert is picked up, not a 500."""
        # Arrange
        tags = await integration_env.get(TagRepository)
        repo = await integration_env.get(PostRepository)
        session = await integration_env.get(AsyncSession)
        tag_id = await tags.create(
            NewTag(name="Itest Racing", slug=TagSlug("itest-racing"), color="#000000")
        )

        execute = session.execute
        calls = []

        class Missing:
            def scalar(self):
                return None

        async def first_lookup_misses(statement, *args, **kwargs):
            calls.append(statement)
            if len(calls) == 1:
                return Missing()
            return await execute(statement, *args, **kwargs)

        monkeypatch.setattr(session, "execute", first_lookup_misses)

        # Act
        resolved = await repo._resolve_tag_id("Itest Racing")

        # Assert
        assert resolved == tag_id
        assert len(calls) == 3
