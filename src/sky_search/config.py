"""Application configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from skyscanner import BASE_URL, ClientConfig
from skyscanner.client import DEFAULT_QUERY_TIMEOUT


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SKY_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", gt=0, le=65535)
    reload: bool = Field(default=False, description="Enable auto-reload in development")

    # Skyscanner client settings
    skyscanner_api_key: str = Field(default="", description="Partner API key (x-api-key)")
    skyscanner_base_url: str = Field(default=BASE_URL, description="Partners API base URL")
    skyscanner_query_timeout: float = Field(
        default=DEFAULT_QUERY_TIMEOUT,
        description="Timeout for a whole API call (seconds)",
        gt=0,
        le=300,
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    # Culture reference data cache
    culture_cache_ttl: int = Field(
        default=3600,
        description="Culture data cache TTL in seconds (1 hour)",
        gt=0,
        le=86400,
    )
    culture_cache_size: int = Field(
        default=256,
        description="Maximum number of cached culture responses",
        gt=0,
        le=10000,
    )

    def client_config(self) -> ClientConfig:
        """
        Build Skyscanner client configuration.

        Raises:
            pydantic.ValidationError: API key is not set
        """
        return ClientConfig(
            api_key=self.skyscanner_api_key,
            query_timeout=self.skyscanner_query_timeout,
            base_url=self.skyscanner_base_url,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get application settings (singleton).

    Returns:
        Settings instance
    """
    return Settings()
