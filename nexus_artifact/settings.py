"""Runtime configuration for the artifact resolution service."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nexus_artifact.modules.artifact.secrets.base import ExecutionMode


class Settings(BaseSettings):
    """Configuration values mapped from ``ARTIFACT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("Nexus Artifact API")
    version: str = Field("1.4.0")

    # Secret store selection: standalone reads plain items from disk,
    # managed pulls encrypted items from the config server.
    execution_mode: ExecutionMode = Field(ExecutionMode.STANDALONE)
    data_bag_path: str = Field("/var/lib/nexus-artifact/data_bags")
    config_server_url: Optional[str] = Field(None)
    config_server_token: Optional[str] = Field(None)
    encrypted_data_bag_secret: Optional[str] = Field(None)
    config_server_timeout: float = Field(30.0)

    # Nexus client
    nexus_timeout: float = Field(30.0)
    ssl_verify: bool = Field(True)

    log_level: str = Field("INFO")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
