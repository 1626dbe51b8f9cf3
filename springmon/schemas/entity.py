"""Pydantic schemas for the generic entity endpoints.

Entity bodies themselves are open JSON objects and carry no schema.
"""

from __future__ import annotations

from pydantic import BaseModel


class EntityPlaceholder(BaseModel):
    """Body of ``GET /api/entities/{id}``."""

    id: int
    message: str


class MessageResponse(BaseModel):
    message: str
