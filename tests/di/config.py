"""Mock config provider for testing."""

import tempfile
from pathlib import Path

from dishka import Scope, provide

from folio.config import AuthSettings, ContentSettings, Settings
from folio.util.di.core import ConfigProvider

TEST_ADMIN_USERNAME = "test-admin"
TEST_ADMIN_PASSWORD = "test-secret"


class MockConfigProvider(ConfigProvider):
    """Test settings: fake admin credential and a throwaway content directory.

    Each container gets its own empty content root, so tests can drop
    markdown documents into it without touching the repository's content.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide settings isolated from the environment."""
        return Settings(
            environment="test",
            auth=AuthSettings(
                admin_username=TEST_ADMIN_USERNAME,
                admin_password=TEST_ADMIN_PASSWORD,
            ),
            content=ContentSettings(root=Path(tempfile.mkdtemp(prefix="folio-content-"))),
        )
