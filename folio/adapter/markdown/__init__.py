"""Markdown file-backed post store."""

from .frontmatter import split_frontmatter, load_metadata
from .store import MarkdownPostStore

__all__ = [
    "MarkdownPostStore",
    "load_metadata",
    "split_frontmatter",
]
