"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_all_posts import (
    DeleteAllPostsRequest,
    DeleteAllPostsResponse,
    DeleteAllPostsUseCase,
)
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_featured_posts import (
    ListFeaturedPostsRequest,
    ListFeaturedPostsResponse,
    ListFeaturedPostsUseCase,
)
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import (
    PostChanges,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeleteAllPostsRequest",
    "DeleteAllPostsResponse",
    "DeleteAllPostsUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListFeaturedPostsRequest",
    "ListFeaturedPostsResponse",
    "ListFeaturedPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostChanges",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
