"""Pydantic-based settings loaded from environment variables.

Every variable carries the ``EMAIL_SYNTAX_`` prefix. Flag overrides are
nested with a double underscore, for example
``EMAIL_SYNTAX_DOMAIN__LOCALHOST=true``. Unset overrides stay ``None`` and
resolve to the built-in defaults.

Usage::

    from email_syntax.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# ---------------------------------------------------------------------------
# Type alias: env var string "a,b,c" → list[str]
# ---------------------------------------------------------------------------
CsvList = Annotated[list[str], NoDecode]


class LocalOverrides(BaseModel):
    """Optional local-part flag overrides."""

    alpha_upper: bool | None = None
    alpha_lower: bool | None = None
    numeric: bool | None = None
    period: bool | None = None
    printable: bool | None = None
    quote: bool | None = None
    hyphen: bool | None = None
    spaces: bool | None = None


class DomainOverrides(BaseModel):
    """Optional domain-part flag overrides."""

    alpha_upper: bool | None = None
    alpha_lower: bool | None = None
    numeric: bool | None = None
    period: bool | None = None
    hyphen: bool | None = None
    tld: bool | None = None
    localhost: bool | None = None
    chars_before_dot: int | None = None
    chars_after_dot: int | None = None


class Settings(BaseSettings):
    """Environment configuration for validators built with ``from_settings``."""

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_SYNTAX_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- General ------------------------------------------------------------
    log_level: str = "INFO"

    # -- Pre-processing -----------------------------------------------------
    lowercase: bool = False

    # -- Known TLD table ----------------------------------------------------
    extra_tlds: CsvList = Field(default_factory=list)

    # -- Rule overrides -----------------------------------------------------
    local: LocalOverrides = Field(default_factory=LocalOverrides)
    domain: DomainOverrides = Field(default_factory=DomainOverrides)

    @field_validator("extra_tlds", mode="before")
    @classmethod
    def split_csv(cls, value: object) -> list[str]:
        """Convert comma-separated env string to a list of bare labels."""
        if isinstance(value, str):
            items = value.split(",")
        elif isinstance(value, list):
            items = value
        else:
            return []
        return [
            str(item).strip().lstrip(".").lower()
            for item in items
            if str(item).strip().lstrip(".")
        ]

    def to_params(self) -> dict[str, Any]:
        """Return the partial override mapping accepted by ``resolve_rules``."""
        return {
            "local": self.local.model_dump(exclude_none=True),
            "domain": self.domain.model_dump(exclude_none=True),
            "sanitize": {"lowercase": self.lowercase},
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
