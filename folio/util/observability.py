"""Observability for the blog API, built on Logfire.

Spans wrap every resolver, service and use case call; FastAPI requests and
SQL statements are traced by the integrations below. Without a token
everything stays on the console.

Usage:
    import logfire

    with logfire.span("content_resolver.get_all_posts"):
        logfire.info("Merged posts", count=len(posts))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from folio.config import ObservabilitySettings, Settings

SERVICE_NAME = "folio-blog"
SERVICE_VERSION = "0.1.0"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise a token
    enables sending.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Args:
        settings: Application settings
    """
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        content_root=str(settings.content.root),
    )


def _request_attributes(request, attributes):
    # Record whether credentials or bulk-delete confirmation were sent,
    # never their values
    headers = getattr(request, "headers", {})
    return {
        **attributes,
        "method": getattr(request, "method", None),
        "path": request.url.path if hasattr(request, "url") else None,
        "has_credentials": "authorization" in headers,
        "bulk_delete_confirmed": "x-confirm-delete-all" in headers,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Headers are not captured since Authorization carries the admin
    credential.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued against the posts and tags tables."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", url=engine.url.render_as_string(hide_password=True))
