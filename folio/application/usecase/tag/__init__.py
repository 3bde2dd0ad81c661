"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .list_tags import ListTagsResponse, ListTagsUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
]
