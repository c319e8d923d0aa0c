"""
Unit tests for settings loading.
"""

import pytest

from pawmatch_ai import config
from pawmatch_ai.config import Settings, get_settings, reload_settings


class TestSettings:
    """Unit tests for Settings and the global accessor."""

    @pytest.fixture(autouse=True)
    def restore_settings(self):
        yield
        reload_settings()

    def test_defaults(self, monkeypatch):
        for name in ("AGENT_API_BASE_URL", "AGENT_API_KEY", "API_TIMEOUT", "TOP_FACTORS_COUNT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.agent_api_base_url == "http://localhost:3000/api"
        assert settings.agent_api_key is None
        assert settings.api_timeout == 120
        assert settings.match_coordinator_agent_id == "6987f79df8f483cee28b9a5e"
        assert settings.top_factors_count == 3

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("API_TIMEOUT", "30")
        monkeypatch.setenv("top_factors_count", "2")

        settings = reload_settings()

        assert settings.api_timeout == 30
        assert settings.top_factors_count == 2
        assert get_settings() is settings
        assert config._settings is settings

    def test_unrelated_variables_ignored(self, monkeypatch):
        """Test deployment-wide variables such as LOG_LEVEL are not settings."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = reload_settings()

        assert not hasattr(settings, "log_level")
        assert not hasattr(settings, "environment")

    def test_top_factors_count_bounded(self, monkeypatch):
        monkeypatch.setenv("TOP_FACTORS_COUNT", "7")

        with pytest.raises(ValueError):
            reload_settings()
