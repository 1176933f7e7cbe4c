"""Tests for settings and credential lookup."""

import pytest

from config import PROVIDER_KEY_ENV_VARS, Settings
from exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for names in PROVIDER_KEY_ENV_VARS.values():
        for name in names:
            monkeypatch.delenv(name, raising=False)
    for name in ("STRATEGY_ANALYST_DEFAULT_MODEL", "STRATEGY_ANALYST_API_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.default_provider == "gemini"
        assert settings.default_model == "gemini-3.1-pro-preview"
        assert settings.api_timeout_seconds is None
        assert settings.gemini_api_key == ""

    @pytest.mark.parametrize("env_var", PROVIDER_KEY_ENV_VARS["gemini"])
    def test_gemini_key_from_any_accepted_variable(self, clean_env, env_var):
        clean_env.setenv(env_var, "from-env")
        assert Settings(_env_file=None).api_key_for("gemini") == "from-env"

    def test_prefixed_settings(self, clean_env):
        clean_env.setenv("STRATEGY_ANALYST_DEFAULT_MODEL", "gemini-2.5-pro")
        clean_env.setenv("STRATEGY_ANALYST_API_TIMEOUT_SECONDS", "45")
        settings = Settings(_env_file=None)
        assert settings.default_model == "gemini-2.5-pro"
        assert settings.api_timeout_seconds == 45

    def test_api_key_for_unknown_provider(self, test_settings):
        assert test_settings.api_key_for("watsonx") == ""

    def test_require_api_key(self, test_settings):
        assert test_settings.require_api_key("openai") == "test-openai-key"

    def test_require_api_key_missing(self, test_settings):
        with pytest.raises(ConfigurationError) as exc_info:
            test_settings.require_api_key("anthropic")
        message = str(exc_info.value)
        assert "anthropic" in message
        assert "ANTHROPIC_API_KEY" in message

    def test_whitespace_key_counts_as_missing(self):
        settings = Settings(_env_file=None, gemini_api_key="   ")
        with pytest.raises(ConfigurationError):
            settings.require_api_key("gemini")
