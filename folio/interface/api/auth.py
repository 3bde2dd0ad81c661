"""HTTP Basic authentication for the admin API.

Every request is checked on its own; there are no sessions or tokens.
"""

import base64
import binascii
from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from folio.domain.service import AuthService


class OptionalHTTPBasic(HTTPBasic):
    """HTTP Basic scheme that never rejects a request by itself.

    A missing, non-Basic or undecodable Authorization header yields None, so
    public endpoints serve the caller anonymously and admin endpoints answer
    with their own challenge. Credentials are decoded as UTF-8.
    """

    def __init__(self) -> None:
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> Optional[HTTPBasicCredentials]:  # type: ignore[override]
        authorization = request.headers.get("Authorization")
        scheme, param = get_authorization_scheme_param(authorization)
        if not authorization or scheme.lower() != "basic":
            return None

        try:
            decoded = base64.b64decode(param, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None

        username, separator, password = decoded.partition(":")
        if not separator:
            return None
        return HTTPBasicCredentials(username=username, password=password)


basic_auth = OptionalHTTPBasic()


def is_authenticated(
    auth_service: AuthService, credentials: HTTPBasicCredentials | None
) -> bool:
    """Whether the request carries the admin credential."""
    if credentials is None:
        return False
    return auth_service.verify(credentials.username, credentials.password)


def unauthorized(auth_service: AuthService, detail: str = "Unauthorized") -> HTTPException:
    """401 carrying a Basic challenge for the configured realm."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": f'Basic realm="{auth_service.realm}"'},
    )


def require_admin(
    auth_service: AuthService, credentials: HTTPBasicCredentials | None
) -> None:
    """Raise a 401 challenge unless the request carries the admin credential.

    Raises:
        HTTPException: 401 if credentials are missing or wrong
    """
    if not is_authenticated(auth_service, credentials):
        raise unauthorized(auth_service)
