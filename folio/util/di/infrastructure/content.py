"""File-backed content providers."""

import logfire
from dishka import Scope, provide

from folio.adapter.markdown import MarkdownPostStore
from folio.config import ContentSettings
from folio.domain.repository import FilePostRepository
from folio.util.di.base import ProviderBase


class ProdContentProvider(ProviderBase):
    """Markdown content provider - concrete, the content root comes from settings."""

    @provide(scope=Scope.APP)
    def get_file_post_repository(self, content_settings: ContentSettings) -> FilePostRepository:
        """Provide the markdown post store."""
        if not content_settings.root.is_dir():
            logfire.warn(
                "Content directory does not exist; no file-backed posts will be served",
                root=str(content_settings.root),
            )
        return MarkdownPostStore(
            root=content_settings.root, extensions=content_settings.extensions
        )
