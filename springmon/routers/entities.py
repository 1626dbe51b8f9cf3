"""Generic entity routes.

Bodies are open JSON objects; none of these routes touch a store.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from springmon.schemas.entity import EntityPlaceholder, MessageResponse
from springmon.services import entity_handler as entity_svc

router = APIRouter(prefix="/api/entities", tags=["Entities"])

# Signed 64-bit range
EntityId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("", response_model=list[dict[str, Any]])
async def list_entities() -> list[dict[str, Any]]:
    return entity_svc.list_entities()


@router.post("", response_model=dict[str, Any])
async def create_entity(
    payload: dict[str, Any] = Body(..., examples=[{"name": "a"}]),
) -> dict[str, Any]:
    """Echo the body with a provisional ``id`` and ``created_at`` / ``updated_at``."""
    return entity_svc.create_entity(payload)


@router.get("/{entity_id}", response_model=EntityPlaceholder)
async def get_entity(entity_id: EntityId) -> dict[str, Any]:
    return entity_svc.get_entity(entity_id)


@router.put("/{entity_id}", response_model=dict[str, Any])
async def update_entity(
    entity_id: EntityId,
    payload: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """Echo the body with ``id`` taken from the path and a fresh ``updated_at``."""
    return entity_svc.update_entity(entity_id, payload)


@router.delete("/{entity_id}", response_model=MessageResponse)
async def delete_entity(entity_id: EntityId) -> dict[str, str]:
    return entity_svc.delete_entity(entity_id)
