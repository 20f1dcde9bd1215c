"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults reproduce the reference deployment (port 8080, logfmt to stderr)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service identity
    service_name: str = "stringsvc"
    service_version: str = "1.0.0"

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: Literal["logfmt", "json", "text"] = "logfmt"
    metrics_enabled: bool = True
    metrics_namespace: str = "my_group"
    metrics_subsystem: str = "string_service"


@lru_cache
def get_settings() -> Settings:
    return Settings()
