"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./tube_companion.db",
        description="SQLAlchemy connection string for videos, notes and event logs",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )

    # API Server
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    api_reload: bool = Field(default=False, description="Enable auto-reload for development")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the proxy",
    )

    # YouTube Data API (server side, used by the proxy)
    youtube_provider: Literal["youtube", "stub"] = Field(
        default="youtube",
        description="Platform adapter used by the proxy (youtube, stub)",
    )
    youtube_api_key: str | None = Field(default=None, description="YouTube Data API key")
    youtube_api_base_url: str = Field(
        default="https://www.googleapis.com/youtube/v3",
        description="YouTube Data API base URL",
    )
    youtube_request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for YouTube Data API requests",
    )

    # Client side
    proxy_url: str = Field(
        default="http://localhost:8000/functions/v1/youtube-api",
        description="URL of the YouTube proxy endpoint used by the dashboard client",
    )
    proxy_request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for proxy requests",
    )
    companion_user_id: str | None = Field(
        default=None,
        description="Signed-in user ID for the CLI",
    )

    # Event logging
    event_fallback_path: Path | None = Field(
        default=None,
        description="JSON-lines file receiving events the store could not accept",
    )
    event_buffer_size: int = Field(
        default=1000,
        description="Maximum number of events kept in the local fallback buffer",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


# Convenience alias
settings = get_settings()
