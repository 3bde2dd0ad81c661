"""Unit tests for provider selection and the test container."""

import pytest

from folio.util.di import (
    ConfigProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdContentProvider,
    ProdPersistenceProvider,
    get_provider,
)
from tests.di import MockConfigProvider, MockPersistenceProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdContentProvider) is ProdContentProvider
        assert get_provider(ProdContentProvider, use_mock=True) is ProdContentProvider

    def test_production_variant(self):
        assert get_provider(ConfigProvider) is ProdConfigProvider
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_mock_variant(self):
        assert get_provider(ConfigProvider, use_mock=True) is MockConfigProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


class TestBuildTestContainer:
    def test_unknown_component(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})
