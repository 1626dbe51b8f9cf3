"""SpringMon — command-line entry point.

Usage:
    python -m springmon
"""

from __future__ import annotations

import structlog
import uvicorn

from springmon.core.config import settings
from springmon.core.logging import setup_logging

log = structlog.get_logger()


def main() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )
    log.info("springmon_serving", bind=settings.bind)
    uvicorn.run(
        "springmon.main:app",
        host=settings.service_host,
        port=settings.service_port,
        log_level=settings.log_level.lower(),
        # setup_logging already owns the uvicorn loggers
        log_config=None,
    )


if __name__ == "__main__":
    main()
