"""Library configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level")
    json_logs: bool = Field(default=True, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Settings loaded from ``EXPRESSIVE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXPRESSIVE_",
        env_nested_delimiter="__",
        env_file=(Path.cwd() / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    expose_exception_details: bool = Field(default=False, description="Send str(exc) instead of the reason phrase for foreign errors")
    metrics_enabled: bool = Field(default=True)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized settings."""

    return Settings()


settings = get_settings()
