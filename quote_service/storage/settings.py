"""
Storage settings using Pydantic for environment-based configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration for database and connection settings."""

    database_path: str = Field(
        default="./quotes.db", description="Path to SQLite database file"
    )
    max_connections: int = Field(
        default=10, gt=0, description="Maximum number of open database connections"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Create a global instance
storage_settings = StorageSettings()
