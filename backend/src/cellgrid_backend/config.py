"""
CellGrid configuration.

Settings are read from ``CELLGRID_``-prefixed environment variables or a
local ``.env`` file via pydantic-settings.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-level settings for the table server."""

    model_config = SettingsConfigDict(
        env_prefix="CELLGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Address the HTTP server binds to")
    port: int = Field(default=8080, ge=0, le=65535, description="Port the HTTP server binds to")
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def bind_address(self) -> str:
        return f"{self.host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
