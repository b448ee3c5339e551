"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NAPISY_",
        case_sensitive=False,
    )

    # Napiprojekt endpoints
    search_url: str = Field(
        default="http://napiprojekt.pl/unit_napisy/dl.php",
        description="Subtitles search endpoint",
    )
    download_url: str = Field(
        default="http://napiprojekt.pl/api/api-napiprojekt3.php",
        description="Subtitles download endpoint",
    )
    # The service answers "permission denied" for any other client name.
    client_name: str = Field(default="NapiProjektPython", description="Client name sent on download")
    client_version: str = Field(default="0.1", description="Client version sent on download")

    # HTTP
    connect_timeout: float = Field(default=30.0, description="Connect timeout in seconds")
    request_timeout: float = Field(default=180.0, description="Overall request timeout in seconds")
    max_connections: int = Field(default=100, description="Connection pool size")
    keepalive_expiry: float = Field(default=90.0, description="Idle keep-alive expiry in seconds")

    # Application
    default_language: str = Field(
        default="ENG",
        description="Subtitles language; the service falls back to Polish",
    )
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
