"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Retry defaults (5 retries, 5s fixed delay) match the upstream's rate-limit contract

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all settings: works out-of-the-box against a local upstream
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream employee service
    upstream_base_url: str = "http://localhost:8112/api/v1/employee"

    @field_validator("upstream_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    upstream_timeout_seconds: float = 10.0
    upstream_max_retries: int = 5
    upstream_retry_delay_seconds: float = 5.0
    upstream_max_connections: int = 100
    upstream_max_keepalive_connections: int = 20

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
