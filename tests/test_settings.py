"""
Tests for the environment-based settings.
"""

from quote_service.api.service import app
from quote_service.api.settings import APISettings, api_settings
from quote_service.storage.settings import StorageSettings


class TestAPISettings:
    """Test cases for APISettings."""

    def test_defaults(self, monkeypatch):
        """Test the default server and metadata values."""
        for name in ("API_TITLE", "API_VERSION", "API_HOST", "API_PORT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = APISettings(_env_file=None)

        assert settings.api_title == "Quote API"
        assert settings.api_version == "1.0.0"
        assert settings.api_host == "0.0.0.0"
        assert settings.api_port == 8000

    def test_environment_overrides(self, monkeypatch):
        """Test that environment variables override the defaults."""
        monkeypatch.setenv("API_TITLE", "Book Quotes")
        monkeypatch.setenv("API_VERSION", "2.1.0")
        monkeypatch.setenv("API_PORT", "9000")

        settings = APISettings(_env_file=None)

        assert settings.api_title == "Book Quotes"
        assert settings.api_version == "2.1.0"
        assert settings.api_port == 9000

    def test_app_metadata_comes_from_settings(self):
        """Test that the FastAPI app is built from the API settings."""
        assert app.title == api_settings.api_title
        assert app.description == api_settings.api_description
        assert app.version == api_settings.api_version


class TestStorageSettings:
    """Test cases for StorageSettings."""

    def test_environment_overrides(self, monkeypatch):
        """Test that the database path and pool size come from the environment."""
        monkeypatch.setenv("DATABASE_PATH", "/tmp/other.db")
        monkeypatch.setenv("MAX_CONNECTIONS", "3")

        settings = StorageSettings(_env_file=None)

        assert settings.database_path == "/tmp/other.db"
        assert settings.max_connections == 3
