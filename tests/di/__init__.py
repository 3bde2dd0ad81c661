"""Mock providers for testing."""

from .config import TEST_ADMIN_PASSWORD, TEST_ADMIN_USERNAME, MockConfigProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockConfigProvider",
    "MockPersistenceProvider",
    "TEST_ADMIN_PASSWORD",
    "TEST_ADMIN_USERNAME",
    "build_test_container",
]
