"""Health, info and runtime status routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from springmon.schemas.status import ApplicationInfo, HealthStatus, RuntimeStatus
from springmon.services import status_reporter

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health", response_model=HealthStatus)
async def health() -> dict[str, Any]:
    return status_reporter.get_health_status()


@router.get("/info", response_model=ApplicationInfo)
async def info() -> dict[str, Any]:
    return status_reporter.get_application_info()


@router.get("/status", response_model=RuntimeStatus)
async def runtime_status() -> dict[str, Any]:
    """Version, clock, memory and processor snapshot."""
    return status_reporter.get_status()
