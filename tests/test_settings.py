"""
Tests for environment-driven settings.
"""

import pytest

from plugin_config.settings import Settings, get_settings, settings


class TestSettings:

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        for name in ("THROW_ON_UNSUPPORTED_OPERATION", "PREFIX_PATH", "COLOR_CHAR", "LOG_LEVEL"):
            monkeypatch.delenv(f"PLUGIN_CONFIG_{name}", raising=False)

        fresh = Settings(_env_file=None)

        assert fresh.throw_on_unsupported_operation is True
        assert fresh.prefix_path == "prefix.prefix"
        assert fresh.color_char == "&"
        assert fresh.log_level == "INFO"

    @pytest.mark.unit
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PLUGIN_CONFIG_THROW_ON_UNSUPPORTED_OPERATION", "false")
        monkeypatch.setenv("PLUGIN_CONFIG_PREFIX_PATH", "lang.prefix")

        fresh = Settings(_env_file=None)

        assert fresh.throw_on_unsupported_operation is False
        assert fresh.prefix_path == "lang.prefix"

    @pytest.mark.unit
    def test_get_settings_returns_global(self):
        assert get_settings() is settings
