"""
Centralized configuration with validation.

Uses pydantic-settings to load and validate all environment variables at startup.
Fail fast with clear error messages if config is malformed.
"""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from bias_review.constants import CacheConfig, RequestLimits, TooltipDefaults


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level: DEBUG, INFO, WARNING, ERROR",
    )
    LOG_JSON: bool = Field(
        default=True,
        description="Emit single-line JSON logs. Disable for human-readable local output.",
    )

    # CORS
    CORS_ORIGINS: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (dashboard hosts)",
    )

    # Influence map
    INFLUENCE_MAP_CACHE_SIZE: int = Field(
        default=CacheConfig.INFLUENCE_MAP_MAX_ENTRIES,
        ge=1,
        description="Max memoized influence maps keyed by (content, bias, behaviour)",
    )
    MAX_CONTENT_CHARS: int = Field(
        default=RequestLimits.MAX_CONTENT_CHARS,
        ge=1,
        description="Reject article bodies longer than this (HTTP 413)",
    )
    TOOLTIP_FLIP_THRESHOLD_PX: int = Field(
        default=TooltipDefaults.FLIP_THRESHOLD_PX,
        ge=0,
        description="Tooltips for anchors closer than this to the viewport top open below",
    )

    LOG_LEVELS: ClassVar[set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any casing, reject unknown levels."""
        level = v.strip().upper()
        if level not in cls.LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(cls.LOG_LEVELS)}, got '{v}'")
        return level

    @property
    def cors_origins(self) -> list[str]:
        """CORS_ORIGINS split into a clean list."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings. Call at startup to validate config."""
    return Settings()
