"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__version__ = "0.1.0"


class ThesaurusSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OPENTHESAURUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    query_url: HttpUrl = Field(
        default="https://www.openthesaurus.de/synonyme/search",
        description="Search endpoint of the thesaurus service.",
    )
    response_format: str = Field(default="text/xml", min_length=1)
    mode: str = Field(default="all", min_length=1)
    connect_timeout_seconds: float = Field(default=3.0, gt=0, le=60)
    read_timeout_seconds: float = Field(default=6.0, gt=0, le=120)
    user_agent: str = f"openthesaurus-client/{__version__}"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> ThesaurusSettings:
    """Return cached settings instance."""

    return ThesaurusSettings()


__all__ = ["ThesaurusSettings", "get_settings"]
