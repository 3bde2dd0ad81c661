"""HTTP error envelope."""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build an ``{"error": message}`` response."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Reshape HTTPException into the error envelope, keeping its headers."""
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


def _describe(error: dict) -> str:
    # Drop the leading "body"/"query" part of the location
    location = ".".join(str(part) for part in error.get("loc", ())[1:])
    return f"{location}: {error['msg']}" if location else error["msg"]


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 with the error envelope."""
    message = "; ".join(_describe(error) for error in exc.errors()) or "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)
