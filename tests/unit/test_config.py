"""Tests for application configuration."""

from faculty_api.config import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_settings_loads_from_env(self, monkeypatch):
        """Settings reads environment variables."""
        monkeypatch.setenv("API_TITLE", "Test API")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.API_TITLE == "Test API"
        assert settings.DEBUG is True
        assert settings.PORT == 9000
        assert settings.log_level == "DEBUG"

    def test_defaults(self, monkeypatch):
        """Unset variables fall back to defaults."""
        for name in ("DEBUG", "PORT", "ENVIRONMENT", "DATABASE_URL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.DEBUG is False
        assert settings.PORT == 8000
        assert settings.environment == "development"
        assert settings.is_production is False
        assert settings.DATABASE_URL is None

    def test_is_production(self, monkeypatch):
        """ENVIRONMENT=production switches on production mode."""
        monkeypatch.setenv("ENVIRONMENT", "Production")

        assert Settings().is_production is True

    def test_get_settings_is_cached(self):
        """get_settings returns one shared instance."""
        assert get_settings() is get_settings()
