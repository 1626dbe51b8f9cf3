"""Entity handler — generic CRUD operations that echo their input.

Nothing is stored. Payloads are open JSON objects; the handler only stamps
``id`` and the ``created_at`` / ``updated_at`` epoch-millisecond fields.
"""

from __future__ import annotations

from typing import Any

import structlog

from springmon.core import clock

logger = structlog.get_logger(__name__)

PLACEHOLDER_MESSAGE = "Entity endpoint ready for implementation"


def list_entities() -> list[dict[str, Any]]:
    """Return the entity collection, which is always empty."""
    return []


def create_entity(payload: dict[str, Any]) -> dict[str, Any]:
    """Echo *payload* with a provisional id and creation timestamps.

    The id is the creation time in epoch millis, so two creates within the
    same millisecond share an id.
    """
    now = clock.current_millis()
    entity = dict(payload)
    entity["id"] = now
    entity["created_at"] = now
    entity["updated_at"] = now

    logger.info("entity_created", entity_id=now, fields=len(payload))
    return entity


def get_entity(entity_id: int) -> dict[str, Any]:
    return {"id": entity_id, "message": PLACEHOLDER_MESSAGE}


def update_entity(entity_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Echo *payload* with ``id`` forced to *entity_id* and a fresh ``updated_at``."""
    entity = dict(payload)
    entity["id"] = entity_id
    entity["updated_at"] = clock.current_millis()

    logger.info("entity_updated", entity_id=entity_id, fields=len(payload))
    return entity


def delete_entity(entity_id: int) -> dict[str, str]:
    logger.info("entity_deleted", entity_id=entity_id)
    return {"message": f"Entity {entity_id} deleted successfully"}
