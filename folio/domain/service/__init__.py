"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .post_service import PostService
from .resolver import ContentResolver, ContentStats, FileSourced, StoreSourced
from .tag_service import TagService

__all__ = [
    "AuthService",
    "ContentResolver",
    "ContentStats",
    "FileSourced",
    "PostService",
    "Service",
    "StoreSourced",
    "TagService",
]
