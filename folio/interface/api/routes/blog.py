"""Blog post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from fastapi.security import HTTPBasicCredentials

from folio.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeleteAllPostsRequest,
    DeleteAllPostsResponse,
    DeleteAllPostsUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListFeaturedPostsRequest,
    ListFeaturedPostsResponse,
    ListFeaturedPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostChanges,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from folio.domain.error import (
    AuthenticationRequiredError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from folio.domain.service import AuthService
from folio.interface.api.auth import basic_auth, is_authenticated, require_admin, unauthorized

router = APIRouter(prefix="/blog", tags=["blog"], route_class=DishkaRoute)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    auth_service: FromDishka[AuthService],
    include_unpublished: bool = Query(default=False, alias="includeUnpublished"),
    tag: str | None = Query(default=None),
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> ListPostsResponse:
    """List posts from both content sources, newest first.

    Unpublished posts are only included for authenticated callers who ask
    for them. ``?tag=<slug>`` narrows the list to one tag.
    """
    try:
        return await use_case.execute(
            ListPostsRequest(
                include_unpublished=include_unpublished,
                authenticated=is_authenticated(auth_service, credentials),
                tag=tag,
            )
        )
    except AuthenticationRequiredError as e:
        raise unauthorized(auth_service, str(e))
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch blog posts",
        )


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostRequest,
    use_case: FromDishka[CreatePostUseCase],
    auth_service: FromDishka[AuthService],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> CreatePostResponse:
    """Create a stored post.

    Requires authentication. Slug and reading time are derived when not
    supplied.

    Raises:
        HTTPException: 401 if not authenticated, 400 on missing fields or a
            duplicate slug
    """
    require_admin(auth_service, credentials)

    try:
        return await use_case.execute(request)
    except (ValidationError, ConflictError) as e:
        logfire.warn("Post creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create blog post",
        )


@router.delete("", response_model=DeleteAllPostsResponse)
async def delete_all_posts(
    use_case: FromDishka[DeleteAllPostsUseCase],
    auth_service: FromDishka[AuthService],
    confirmation: str | None = Header(default=None, alias="X-Confirm-Delete-All"),
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> DeleteAllPostsResponse:
    """Delete every stored post.

    Requires authentication and the exact confirmation header value.
    File-backed posts are not affected.
    """
    require_admin(auth_service, credentials)

    try:
        return await use_case.execute(DeleteAllPostsRequest(confirmation=confirmation))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error deleting all posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete blog posts",
        )


@router.get("/featured", response_model=ListFeaturedPostsResponse)
async def list_featured_posts(
    use_case: FromDishka[ListFeaturedPostsUseCase],
    limit: int | None = Query(default=None, ge=1, le=50),
) -> ListFeaturedPostsResponse:
    """List published featured posts, newest first."""
    try:
        return await use_case.execute(ListFeaturedPostsRequest(limit=limit))
    except Exception as e:
        logfire.error("Unexpected error listing featured posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch featured posts",
        )


@router.get("/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    use_case: FromDishka[GetPostUseCase],
    auth_service: FromDishka[AuthService],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> GetPostResponse:
    """Get a post by slug from either content source.

    Unpublished posts (including drafted files) require authentication.
    """
    try:
        return await use_case.execute(
            GetPostRequest(
                slug=slug, authenticated=is_authenticated(auth_service, credentials)
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AuthenticationRequiredError as e:
        raise unauthorized(auth_service, str(e))
    except Exception as e:
        logfire.error("Unexpected error fetching post", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch blog post",
        )


@router.put("/{slug}", response_model=UpdatePostResponse)
async def update_post(
    slug: str,
    changes: PostChanges,
    use_case: FromDishka[UpdatePostUseCase],
    auth_service: FromDishka[AuthService],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> UpdatePostResponse:
    """Apply a sparse update to a stored post.

    Only fields present in the body change. File-backed posts cannot be
    updated and are reported as not found.
    """
    require_admin(auth_service, credentials)

    try:
        return await use_case.execute(UpdatePostRequest(slug=slug, changes=changes))
    except NotFoundError as e:
        logfire.warn("Post update target not found", slug=slug, error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ConflictError) as e:
        logfire.warn("Post update rejected", slug=slug, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating post", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update blog post",
        )


@router.delete("/{slug}", response_model=DeletePostResponse)
async def delete_post(
    slug: str,
    use_case: FromDishka[DeletePostUseCase],
    auth_service: FromDishka[AuthService],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> DeletePostResponse:
    """Delete a stored post.

    File-backed posts cannot be deleted and are reported as not found.
    """
    require_admin(auth_service, credentials)

    try:
        return await use_case.execute(DeletePostRequest(slug=slug))
    except NotFoundError as e:
        logfire.warn("Post delete target not found", slug=slug, error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error deleting post", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete blog post",
        )
