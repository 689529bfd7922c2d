"""Tests for application configuration."""

import logging
import os
from unittest.mock import patch

from rollkit.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_default_expression(self):
        """Default expression should be a single d20."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.default_expression == "1d20"

    def test_default_show_breakdown(self):
        """Breakdown should be shown by default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.show_breakdown is True

    def test_default_debug_is_false(self):
        """Debug mode should be off by default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.effective_log_level == logging.WARNING


class TestSettingsFromEnvironment:
    """Tests for environment variable overrides."""

    def test_default_expression_from_env(self):
        """DEFAULT_EXPRESSION should override the default."""
        with patch.dict(os.environ, {"DEFAULT_EXPRESSION": "2d20kh1"}):
            settings = Settings(_env_file=None)
        assert settings.default_expression == "2d20kh1"

    def test_log_level_from_env(self):
        """LOG_LEVEL should set the numeric level."""
        with patch.dict(os.environ, {"LOG_LEVEL": "info", "DEBUG": "false"}):
            settings = Settings(_env_file=None)
        assert settings.effective_log_level == logging.INFO

    def test_debug_forces_debug_level(self):
        """DEBUG should win over LOG_LEVEL."""
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR", "DEBUG": "true"}):
            settings = Settings(_env_file=None)
        assert settings.effective_log_level == logging.DEBUG

    def test_unknown_log_level_falls_back_to_warning(self):
        """An unrecognised level name should fall back to WARNING."""
        settings = Settings(_env_file=None, log_level="chatty", debug=False)
        assert settings.effective_log_level == logging.WARNING


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_returns_same_instance(self):
        """get_settings should be cached."""
        assert get_settings() is get_settings()
