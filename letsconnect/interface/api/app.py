"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from letsconnect.config import Settings
from letsconnect.interface.api.errors import install_error_handlers
from letsconnect.interface.api.routes import (
    events,
    gallery,
    health,
    notifications,
    posts,
    reports,
    users,
)
from letsconnect.util.di.container import create_container, setup_di
from letsconnect.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to serve from, the production container if None
    """
    settings = Settings()

    # Instrument httpx for outbound blob store requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Lets Connect API",
        description="Backend API for Lets Connect - posts, gallery, events and the conversations around them",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
            settings.auth.token_header,
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    install_error_handlers(app_instance)

    # Register routes
    # Entity routers go first so /posts/mine and friends win over /posts/{id}
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(posts.engagement_router)
    app_instance.include_router(gallery.router)
    app_instance.include_router(gallery.engagement_router)
    app_instance.include_router(events.router)
    app_instance.include_router(events.engagement_router)
    app_instance.include_router(users.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(reports.router)

    return app_instance
