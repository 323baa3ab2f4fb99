"""
Unit tests for configuration (config.py).
"""

import pytest

from mailparse.config import Settings


class TestSettings:
    """Tests for environment-driven Settings."""

    @pytest.mark.unit
    def test_defaults(self, mock_settings):
        assert mock_settings.max_nesting_depth == 64
        assert mock_settings.max_email_size_mb == 25
        assert mock_settings.log_json is False

    @pytest.mark.unit
    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MAX_NESTING_DEPTH", "5")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.max_nesting_depth == 5
        assert settings.log_level == "DEBUG"
