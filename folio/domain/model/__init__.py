"""Domain model entities for Folio."""

from folio.domain.model.file_post import FilePost
from folio.domain.model.post import NewPost, Post, PostPatch, TagRef, utcnow
from folio.domain.model.tag import NewTag, Tag
from folio.domain.model.unified import UnifiedPost, UnifiedTag

__all__ = [
    "FilePost",
    "NewPost",
    "NewTag",
    "Post",
    "PostPatch",
    "Tag",
    "TagRef",
    "UnifiedPost",
    "UnifiedTag",
    "utcnow",
]
