"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults work out-of-the-box: catalog mirrored to ./data, ticking once per second

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Heating constants (add-time step, quick start) configurable but defaulted to the
      control-panel values in core.domain_types
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from microwave.core.domain_types import (
    DEFAULT_ADD_TIME_SECONDS, QUICK_START_POWER, QUICK_START_SECONDS,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Catalog persistence
    catalog_file: str = "data/custom_programs.json"
    persist_catalog: bool = True

    # Tick driver
    auto_tick: bool = True
    tick_interval_seconds: float = Field(1.0, gt=0)

    # Control panel
    add_time_step_seconds: int = Field(DEFAULT_ADD_TIME_SECONDS, ge=1)
    quick_start_seconds: int = QUICK_START_SECONDS
    quick_start_power: int = QUICK_START_POWER

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

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
