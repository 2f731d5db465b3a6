"""Configuration management using Pydantic Settings"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from core_banking_client.domain.endpoints import DEFAULT_BASE_URL


class Settings(BaseSettings):
    """Client configuration loaded from environment variables"""

    # Empty variables count as unset, so BASE_URL="" falls back to the default
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_ignore_empty=True, extra="ignore"
    )

    # Core Banking API
    base_url: str = DEFAULT_BASE_URL

    # Service
    service_name: str = "core-banking-client"
    log_level: str = "WARNING"

    # HTTP Client
    http_timeout_seconds: float | None = None  # None waits indefinitely
    strict_status: bool = False  # Raise on non-2xx for validate/transfer too

    # Demo output
    pretty_json: bool = False  # Indent JSON bodies instead of printing them raw


@lru_cache
def get_settings() -> Settings:
    """Load settings once; invalid values raise on first use rather than at import"""
    return Settings()
