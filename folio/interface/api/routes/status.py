"""API status routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPBasicCredentials

from folio.application.usecase.status import (
    GetStatusRequest,
    GetStatusResponse,
    GetStatusUseCase,
)
from folio.domain.service import AuthService
from folio.interface.api.auth import basic_auth, is_authenticated

router = APIRouter(tags=["status"], route_class=DishkaRoute)


@router.get("/status", response_model=GetStatusResponse)
async def get_status(
    use_case: FromDishka[GetStatusUseCase],
    auth_service: FromDishka[AuthService],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> GetStatusResponse:
    """API status and content counts.

    Public; reports whether the caller's credentials are valid.
    """
    return await use_case.execute(
        GetStatusRequest(authenticated=is_authenticated(auth_service, credentials))
    )
