"""
Configuration management using pydantic-settings.
All settings loaded from environment variables (12-factor app).
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_workers: int = Field(default=1, ge=1, description="Uvicorn worker processes")
    api_reload: bool = Field(default=True, description="Enable hot reload")
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="CORS allowed origins (comma-separated)",
    )

    # Logging
    log_level: str = Field(default="info", description="Log level")
    log_format: str = Field(default="json", description="Log format (json|console)")

    # Engine Configuration
    cascade_max_depth: int = Field(
        default=3, ge=1, le=10, description="Max cascade traversal depth"
    )
    cascade_magnitude_cutoff: float = Field(
        default=10.0,
        ge=0.0,
        lt=100.0,
        description="Minimum surviving magnitude for a node to count as affected",
    )
    default_region: str = Field(
        default="asia", description="Topology used when a region is unknown"
    )
    batch_max_workers: int = Field(
        default=4, ge=1, le=64, description="Thread pool size for batch analyses"
    )
    batch_max_requests: int = Field(
        default=50, ge=1, description="Maximum analyses accepted in one batch"
    )

    # Development
    dev_mode: bool = Field(default=True, description="Development mode")
    testing: bool = Field(default=False, description="Testing mode")

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, v: str) -> List[str]:
        """Parse comma-separated CORS origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def environment(self) -> str:
        """Short environment label for health checks and startup logs."""
        if self.testing:
            return "testing"
        return "development" if self.dev_mode else "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure singleton behavior.
    """
    return Settings()
