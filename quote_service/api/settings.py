"""
Quote API settings loaded from the environment.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """Server and OpenAPI metadata settings for the quote API."""

    api_title: str = Field(default="Quote API", description="OpenAPI title")
    api_description: str = Field(
        default="API to create, list, update and delete book quotes",
        description="OpenAPI description",
    )
    api_version: str = Field(default="1.0.0", description="OpenAPI version")

    api_host: str = Field(default="0.0.0.0", description="Address uvicorn binds to")
    api_port: int = Field(default=8000, gt=0, description="Port uvicorn listens on")
    log_level: str = Field(default="INFO", description="Uvicorn log level")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


api_settings = APISettings()
