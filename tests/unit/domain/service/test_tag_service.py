"""Unit tests for TagService."""

import pytest

from folio.domain.error import ConflictError, ValidationError
from folio.domain.service import TagService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTag:
    """Tests for create_tag."""

    @pytest.mark.asyncio
    async def test_derives_slug_and_default_color(self, unit_env):
        service = await unit_env.get(TagService)

        tag = await service.create_tag(name="  Machine Learning ")

        assert tag.name == "Machine Learning"
        assert tag.slug.root == "machine-learning"
        assert tag.color == "#06b6d4"
        assert tag.description is None

    @pytest.mark.asyncio
    async def test_keeps_supplied_color_and_description(self, unit_env):
        service = await unit_env.get(TagService)

        tag = await service.create_tag(name="Rust", description="Systems", color="#b7410e")

        assert tag.color == "#b7410e"
        assert tag.description == "Systems"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_name_required(self, unit_env, name):
        service = await unit_env.get(TagService)

        with pytest.raises(ValidationError, match="required"):
            await service.create_tag(name=name)

    @pytest.mark.asyncio
    async def test_name_without_slug_characters_rejected(self, unit_env):
        service = await unit_env.get(TagService)

        with pytest.raises(ValidationError):
            await service.create_tag(name="%%%")

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, unit_env):
        service = await unit_env.get(TagService)
        await service.create_tag(name="Python")

        with pytest.raises(ConflictError, match="already exists"):
            await service.create_tag(name="Python")

    @pytest.mark.asyncio
    async def test_duplicate_slug_conflicts(self, unit_env):
        """Names differing only in case share a slug and collide."""
        service = await unit_env.get(TagService)
        await service.create_tag(name="Python")

        with pytest.raises(ConflictError):
            await service.create_tag(name="python")


class TestGetAllTags:
    """Tests for get_all_tags."""

    @pytest.mark.asyncio
    async def test_sorted_by_name(self, unit_env):
        service = await unit_env.get(TagService)
        for name in ("Zig", "Elixir", "Go"):
            await service.create_tag(name=name)

        tags = await service.get_all_tags()

        assert [t.name for t in tags] == ["Elixir", "Go", "Zig"]
