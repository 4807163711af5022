"""Environment-driven settings via pydantic-settings.

Every field can be overridden with a ``BIGNUM_``-prefixed environment
variable or a ``.env`` file. ``get_settings()`` is cached, one instance
per process.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BIGNUM_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"

    # Seed for the default digit source; None seeds from the clock
    random_seed: int | None = None

    # Calculator operations slower than this are logged with their duration
    slow_operation_seconds: float = Field(default=1.0, ge=0)

    # Self-test grid: operands run over [-limit, limit] in these steps
    selftest_limit: int = Field(default=10_000, gt=0)
    selftest_step_left: int = Field(default=77, gt=0)
    selftest_step_right: int = Field(default=88, gt=0)

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
