"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PoetryApiSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="https://poetrydb.org",
        description="Root of the PoetryDB HTTP API.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    def endpoint(self, path: str) -> str:
        return f"{str(self.base_url).rstrip('/')}/{path.lstrip('/')}"


class PoetSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POET_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"

    api: PoetryApiSettings = Field(default_factory=PoetryApiSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value


@lru_cache
def get_settings() -> PoetSettings:
    """Return cached settings instance."""

    return PoetSettings()


__all__ = [
    "PoetSettings",
    "PoetryApiSettings",
    "get_settings",
]
