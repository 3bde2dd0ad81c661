"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
]
