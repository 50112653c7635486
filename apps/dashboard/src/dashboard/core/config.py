"""Dashboard service configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    environment: Literal["development", "staging", "production"] = Field(
        default="production", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Attestation Collector
    collector_url: str = Field(
        default="http://attestation-collector:8080", alias="COLLECTOR_URL"
    )
    collector_timeout: float = Field(default=10.0, gt=0, alias="COLLECTOR_TIMEOUT")
    poll_interval: float = Field(default=30.0, gt=0, alias="POLL_INTERVAL")

    # Frontend bundle
    static_dir: str = Field(default="/app/static", alias="STATIC_DIR")

    @field_validator("collector_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the collector base URL."""
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
