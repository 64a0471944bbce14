"""Pydantic Settings for Profile Desk configuration."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Profiles backend
    api_base_url: str = "http://localhost:3001/api"
    request_timeout: float | None = Field(
        default=None, description="Total seconds per request; unset waits indefinitely"
    )

    # Operational
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
