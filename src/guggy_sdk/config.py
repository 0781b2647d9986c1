"""Client configuration loaded from the environment."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_ENV = "GUGGY_API_KEY"
DEFAULT_BASE_URL = "https://text2gif.guggy.com/v2"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseSettings):
    """Runtime configuration read from ``GUGGY_*`` environment variables or ``.env``."""

    api_key: str = Field("", alias=API_KEY_ENV)
    base_url: str = Field(DEFAULT_BASE_URL, alias="GUGGY_BASE_URL")
    timeout: float = Field(DEFAULT_TIMEOUT, alias="GUGGY_TIMEOUT", gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, value: str | None) -> str:
        return (value or "").strip()

    @field_validator("base_url", mode="before")
    @classmethod
    def default_blank_base_url(cls, value: str | None) -> str:
        """An exported-but-empty ``GUGGY_BASE_URL`` falls back to the public endpoint."""
        return (value or "").strip() or DEFAULT_BASE_URL
