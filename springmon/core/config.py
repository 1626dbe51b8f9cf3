"""SpringMon — environment-based configuration.

Values are loaded from environment variables and .env files. The same
``settings`` object drives the app factory, the uvicorn runner and
``gunicorn_conf.py``.
"""

from __future__ import annotations

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class SpringMonSettings(BaseSettings):
    """Runtime settings for the SpringMon service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── General ───────────────────────────────
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = "springmon"

    # ── HTTP server ───────────────────────────
    service_host: str = "0.0.0.0"
    service_port: int = 8080

    # ── Gunicorn ──────────────────────────────
    gunicorn_workers: int | None = None
    gunicorn_timeout: int = 60
    gunicorn_graceful_timeout: int = 30
    gunicorn_keepalive: int = 5
    gunicorn_max_requests: int = 1000
    gunicorn_max_requests_jitter: int = 50

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def json_logs(self) -> bool:
        return self.is_production

    @property
    def bind(self) -> str:
        return f"{self.service_host}:{self.service_port}"

    @property
    def worker_count(self) -> int:
        """Configured gunicorn workers, else ``2 * CPUs + 1``."""
        if self.gunicorn_workers:
            return self.gunicorn_workers
        return (os.cpu_count() or 1) * 2 + 1


settings = SpringMonSettings()
