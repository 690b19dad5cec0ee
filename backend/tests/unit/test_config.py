"""
Unit tests for settings.
"""

import pytest

from app.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.openai_api_key is None
        assert not settings.generation_enabled
        assert settings.generation_timeout_seconds == 60
        assert not settings.is_production

    @pytest.mark.unit
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
        monkeypatch.setenv("GENERATION_TIMEOUT_SECONDS", "15")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.generation_enabled
        assert settings.openai_model == "gpt-4o"
        assert settings.generation_timeout_seconds == 15
        assert settings.is_production
