"""Tests for application settings."""

from pocketlaw.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default settings."""
        monkeypatch.delenv("DEBUG", raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "Pocketlaw"
        assert settings.debug is False
        assert settings.webhook_enabled is True
        assert settings.webhook_url == settings.webhook_production_url

    def test_environment_overrides(self, monkeypatch):
        """Test settings read from environment variables."""
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("WEBHOOK_TEST_URL", "https://hooks.example.com/test")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.debug is True
        assert settings.webhook_url == "https://hooks.example.com/test"
        assert settings.log_level == "DEBUG"

    def test_cors_origins_list(self):
        """Test CORS origins are split and trimmed."""
        settings = Settings(_env_file=None, cors_origins="https://a.example.com, https://b.example.com,")
        assert settings.cors_origins_list == ["https://a.example.com", "https://b.example.com"]

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()
