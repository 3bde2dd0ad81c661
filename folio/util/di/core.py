"""Core DI providers."""

from dishka import Scope, provide

from folio.config import AuthSettings, BlogSettings, ContentSettings, Settings
from folio.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Config component base."""

    __mock_component__ = "config"


class ProdConfigProvider(ConfigProvider):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()


class SettingsSectionProvider(ProviderBase):
    """Exposes settings sections to consumers that only need one of them."""

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide file-backed content settings."""
        return settings.content

    @provide(scope=Scope.APP)
    def provide_blog_settings(self, settings: Settings) -> BlogSettings:
        """Provide blog defaults."""
        return settings.blog
