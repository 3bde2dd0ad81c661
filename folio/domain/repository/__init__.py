"""Repository interfaces for the Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence and adapter layers.
"""

from folio.domain.repository.file_post import FilePostRepository
from folio.domain.repository.post import PostRepository
from folio.domain.repository.tag import TagRepository

__all__ = [
    "FilePostRepository",
    "PostRepository",
    "TagRepository",
]
