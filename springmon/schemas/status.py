"""Pydantic schemas for the health, info and status endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(BaseModel):
    """Health payload returned by ``GET /api/health``."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., examples=["UP"])
    disk_space: str = Field(..., alias="diskSpace", examples=["AVAILABLE"])
    database: str = Field(..., examples=["UP"])
    timestamp: int = Field(..., description="Epoch milliseconds")


class ApplicationInfo(BaseModel):
    """Constant application descriptor."""

    name: str
    version: str
    description: str
    status: str


class RuntimeStatus(BaseModel):
    """Runtime snapshot returned by ``GET /api/status``."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., examples=["RUNNING"])
    version: str
    uptime: int = Field(..., description="Epoch milliseconds")
    memory_total: int | None = Field(None, alias="memory-total")
    memory_free: int | None = Field(None, alias="memory-free")
    processors: int
