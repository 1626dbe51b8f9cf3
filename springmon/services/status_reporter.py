"""Status reporter — health, info and runtime status payloads.

Every function is stateless: it reads the clock, the platform's memory and
CPU counters, or module constants, and builds a fresh dict per call.
"""

from __future__ import annotations

import os
from typing import Any

import structlog

from springmon.core import clock

logger = structlog.get_logger(__name__)

APP_NAME = "SpringMon"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Generic Spring Boot Application"


def get_application_info() -> dict[str, Any]:
    """Return the constant application descriptor."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
        "status": "ACTIVE",
    }


def get_health_status() -> dict[str, Any]:
    """Return the health payload stamped with the current epoch millis."""
    return {
        "status": "UP",
        "diskSpace": "AVAILABLE",
        "database": "UP",
        "timestamp": clock.current_millis(),
    }


def get_application_version() -> str:
    return APP_VERSION


def get_status() -> dict[str, Any]:
    """Return the runtime status: version, clock, memory and processor count."""
    return {
        "status": "RUNNING",
        "version": get_application_version(),
        "uptime": clock.current_millis(),
        "memory-total": _sysconf_bytes("SC_PHYS_PAGES"),
        "memory-free": _sysconf_bytes("SC_AVPHYS_PAGES"),
        "processors": os.cpu_count() or 1,
    }


def _sysconf_bytes(pages_name: str) -> int | None:
    """Multiply a ``sysconf`` page count by the page size.

    Returns None when the platform does not expose the counter. Windows has
    no ``sysconf`` at all, and macOS and the BSDs lack ``SC_AVPHYS_PAGES``, so
    there ``memory-free`` is always None. Missing counters are not logged.
    """
    names = getattr(os, "sysconf_names", {})
    if pages_name not in names or "SC_PAGE_SIZE" not in names:
        return None

    try:
        pages = os.sysconf(pages_name)
        page_size = os.sysconf("SC_PAGE_SIZE")
    except (AttributeError, ValueError, OSError) as exc:
        logger.warning("runtime_memory_unavailable", counter=pages_name, error=str(exc))
        return None

    if pages < 0 or page_size < 0:
        logger.warning("runtime_memory_unavailable", counter=pages_name, error="negative")
        return None
    return pages * page_size
