"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasicCredentials

from folio.application.usecase.tag import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
)
from folio.domain.error import ConflictError, ValidationError
from folio.domain.service import AuthService
from folio.interface.api.auth import basic_auth, require_admin

router = APIRouter(
    prefix="/blog/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags",
    description="Stored tags merged with tags named by file-backed posts.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all tags.

    Example:
        GET /blog/tags
    """
    try:
        return await use_case.execute()
    except Exception as e:
        logfire.error("Unexpected error listing tags", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch tags",
        )


@router.post("", response_model=CreateTagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagRequest,
    use_case: FromDishka[CreateTagUseCase],
    auth_service: FromDishka[AuthService],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> CreateTagResponse:
    """Create a tag.

    Requires authentication and a non-empty name.
    """
    require_admin(auth_service, credentials)

    try:
        return await use_case.execute(request)
    except (ValidationError, ConflictError) as e:
        logfire.warn("Tag creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating tag", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create tag",
        )
