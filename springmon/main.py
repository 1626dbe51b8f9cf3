"""SpringMon — FastAPI application factory.

Exposes health/info/status reporting and placeholder entity routes.
"""

from __future__ import annotations

from fastapi import FastAPI

from springmon.core.config import settings
from springmon.core.events import lifespan
from springmon.core.logging import setup_logging
from springmon.core.middleware import RequestContextMiddleware
from springmon.routers.entities import router as entities_router
from springmon.routers.system import router as system_router
from springmon.services.status_reporter import APP_NAME, APP_VERSION


def create_app() -> FastAPI:
    """Construct and return the FastAPI application."""
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )

    application = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    application.add_middleware(RequestContextMiddleware)
    application.include_router(system_router)
    application.include_router(entities_router)

    return application


app = create_app()
