"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from folio.config import Settings
from folio.interface.api.routes import blog, health, status, tags
from folio.interface.error import http_exception_handler, validation_exception_handler
from folio.util.di.container import create_container, setup_di
from folio.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Folio Blog API",
        description="Content API for the portfolio blog: file-backed and stored posts, tags and admin CRUD",
        version=SERVICE_VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Confirm-Delete-All",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Every error leaves as {"error": message}
    app_instance.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app_instance.add_exception_handler(RequestValidationError, validation_exception_handler)

    setup_di(app_instance, container or create_container())

    # Register routes; tags before blog so /blog/tags is not taken as a slug
    app_instance.include_router(health.router)
    app_instance.include_router(status.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(blog.router)

    return app_instance
