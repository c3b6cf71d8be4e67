"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Policy constants (retention cap, recent window, age limit, rate limit) are
      settings, never literals in handlers
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    data_file: str = "data.json"
    entry_retention_cap: int = Field(100, ge=1)
    recent_entries_limit: int = Field(10, ge=1)

    # Validation
    max_age_years: int = Field(120, ge=1)

    # API
    cors_origins: list[str] = ["*"]
    rate_limit_enabled: bool = True
    rate_limit_max_requests: int = Field(100, ge=1)
    rate_limit_window_seconds: int = Field(15 * 60, ge=1)

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
