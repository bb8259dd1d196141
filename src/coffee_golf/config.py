"""Configuration objects for the Coffee Golf tools."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration pulled from environment variables."""

    timezone: Optional[str] = Field(
        default=None,
        description="IANA zone used for 'today'. The host local date is used when unset.",
    )
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    data_file: Optional[Path] = Field(
        default=None,
        description="JSON snapshot loaded into the in-memory store by the CLI and API.",
    )

    model_config = SettingsConfigDict(
        env_prefix="COFFEE_GOLF_",
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
