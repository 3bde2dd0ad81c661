"""Fixtures for end-to-end API tests.

Each test gets a fresh app over a mocked container: in-memory persistence
and an empty temporary content directory.
"""

import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from folio.config import Settings
from folio.interface.api.app import create_app
from tests.conftest import basic_auth_header
from tests.di import build_test_container


@pytest.fixture
def container():
    """Mocked container backing the app under test."""
    container = build_test_container()
    yield container
    asyncio.run(container.close())


@pytest.fixture
def client(container):
    """Create test client."""
    return TestClient(create_app(container))


@pytest.fixture
def content_root(container) -> Path:
    """Content directory the app reads file-backed posts from."""
    settings = asyncio.run(container.get(Settings))
    return settings.content.root


@pytest.fixture
def admin():
    """Authorization header for the test admin."""
    return basic_auth_header()
