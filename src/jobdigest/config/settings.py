"""Pydantic-based settings loaded entirely from environment variables.

All configuration is read from ``.env`` (or real env vars). Mail transport
values are not validated up front; a missing host or recipient surfaces when
the SMTP server rejects the attempt.

Usage::

    from jobdigest.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from jobdigest.config.defaults import (
    DEFAULT_KEYWORDS,
    DEFAULT_MAX_PER_BOARD,
    DEFAULT_MAX_TOTAL,
    DEFAULT_NAVIGATION_TIMEOUT_SECONDS,
    DEFAULT_TIMEZONE,
)

# ---------------------------------------------------------------------------
# Type alias: env var string "a,b,c" → list[str]
# ---------------------------------------------------------------------------
CsvList = Annotated[list[str], NoDecode]


class Settings(BaseSettings):
    """Central configuration — every field maps to an UPPER_SNAKE env var."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- Caps ---------------------------------------------------------------
    max_per_board: int = Field(default=DEFAULT_MAX_PER_BOARD, ge=0)
    max_total: int = Field(default=DEFAULT_MAX_TOTAL, ge=0)

    # -- Keywords -----------------------------------------------------------
    keywords: CsvList = Field(default_factory=list)
    keyword_filter_enabled: bool = False

    # -- SMTP ---------------------------------------------------------------
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_user: str = ""
    smtp_pass: str = ""
    from_email: str = ""
    to_email: str = ""

    # -- Browser ------------------------------------------------------------
    navigation_timeout_seconds: float = Field(
        default=DEFAULT_NAVIGATION_TIMEOUT_SECONDS, gt=0
    )
    headless: bool = True

    # -- Digest -------------------------------------------------------------
    digest_timezone: str = DEFAULT_TIMEZONE

    # -- General ------------------------------------------------------------
    dry_run: bool = False
    log_level: str = "INFO"

    @property
    def navigation_timeout_ms(self) -> float:
        return self.navigation_timeout_seconds * 1000

    # -- CSV field parsing --------------------------------------------------
    @field_validator("keywords", mode="before")
    @classmethod
    def split_csv(cls, value: object) -> list[str]:
        """Convert comma-separated env string to list."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, list):
            return value
        return []

    # Only "true" enables implicit TLS. Looser than an exact match: case and
    # surrounding whitespace are ignored, so "TRUE" and " true " count too.
    @field_validator("smtp_secure", mode="before")
    @classmethod
    def parse_secure_flag(cls, value: object) -> bool:
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)

    # -- Apply built-in defaults when ENV is empty --------------------------
    @model_validator(mode="after")
    def apply_defaults(self) -> Settings:
        """Fill keywords and sender address from defaults when unset."""
        if not self.keywords:
            self.keywords = list(DEFAULT_KEYWORDS)
        if not self.from_email:
            self.from_email = self.smtp_user
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
