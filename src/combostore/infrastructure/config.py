"""Application configuration.

Loaded from ``COMBO_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COMBO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Supabase (remote mode is used only when both are set)
    supabase_url: str | None = Field(default=None)
    supabase_key: str | None = Field(default=None)

    # Local mode
    data_dir: Path = Field(
        default=Path("data"), description="Directory holding the local JSON store"
    )

    log_level: str = Field(default="WARNING")

    @property
    def remote_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
