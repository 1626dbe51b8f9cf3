"""SpringMon — application lifespan (startup / shutdown hooks)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from springmon.core.config import settings
from springmon.services.status_reporter import get_application_version

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info(
        "springmon_starting",
        version=get_application_version(),
        environment=settings.environment,
    )
    yield
    log.info("springmon_stopping")
