"""Markdown post store backed by a content directory."""

from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

import logfire

from folio.adapter.error import FrontmatterError
from folio.adapter.markdown.frontmatter import load_metadata, split_frontmatter
from folio.domain.model.file_post import FilePost
from folio.domain.repository.file_post import FilePostRepository

_MIN_DATE = datetime.min.replace(tzinfo=timezone.utc)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_optional_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _as_tags(value: Any) -> list[str]:
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if isinstance(value, list):
        return [str(tag).strip() for tag in value if tag is not None and str(tag).strip()]
    return []


def _as_date(value: Any) -> Optional[datetime]:
    """Coerce a frontmatter date to an aware datetime."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class MarkdownPostStore(FilePostRepository):
    """File-backed posts read from a directory of markdown documents.

    The directory is scanned on every call; nothing is cached, so edits on
    disk show up on the next request. Missing metadata fields fall back to
    defaults instead of failing.
    """

    def __init__(self, root: Path, extensions: Iterable[str] = (".md", ".mdx")) -> None:
        """Initialize store.

        Args:
            root: Content directory
            extensions: Filename suffixes treated as post documents
        """
        self.root = Path(root)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def _document_paths(self) -> list[Path]:
        """Post documents in the content root, in filename order."""
        if not self.root.is_dir():
            return []
        return sorted(
            path
            for path in self.root.iterdir()
            if path.is_file() and path.suffix.lower() in self.extensions
        )

    def _parse(self, slug: str, text: str) -> FilePost:
        """Build a FilePost from document text."""
        block, body = split_frontmatter(text)
        try:
            meta = load_metadata(block)
        except FrontmatterError as e:
            logfire.warn("Ignoring malformed frontmatter", slug=slug, error=str(e))
            meta = {}

        return FilePost(
            slug=slug,
            title=_as_text(meta.get("title")),
            date=_as_date(meta.get("date")),
            description=_as_text(meta.get("description")),
            tags=_as_tags(meta.get("tags")),
            featured=meta.get("featured") is True,
            draft=meta.get("draft") is True,
            content=body,
            author=_as_optional_text(meta.get("author")),
            cover_image=_as_optional_text(meta.get("cover_image")),
        )

    def _read(self, path: Path) -> Optional[FilePost]:
        """Read one document, or None if it cannot be read."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logfire.error(
                "Failed to read post document",
                path=str(path),
                error=str(e),
                error_type=type(e).__name__,
            )
            return None
        return self._parse(path.stem, text)

    def list_posts(self) -> list[FilePost]:
        """Non-draft posts, newest first by date.

        Ties (and undated posts, which sort last) keep filename order.
        """
        with logfire.span("markdown_store.list_posts", root=str(self.root)):
            posts = []
            for path in self._document_paths():
                post = self._read(path)
                if post is None or post.draft:
                    continue
                posts.append(post)

            # Stable sort: equal dates keep encounter order
            posts.sort(key=lambda p: p.date or _MIN_DATE, reverse=True)
            logfire.info("File posts listed", count=len(posts))
            return posts

    def get_by_slug(self, slug: str) -> Optional[FilePost]:
        """Post for the given slug, drafts included."""
        if not slug or slug.startswith(".") or "/" in slug or "\\" in slug:
            return None

        for ext in self.extensions:
            path = self.root / f"{slug}{ext}"
            if path.is_file():
                return self._read(path)
        return None

    def list_slugs(self) -> list[str]:
        """Slugs of every document, draft or not."""
        return [path.stem for path in self._document_paths()]
