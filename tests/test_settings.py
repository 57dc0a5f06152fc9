"""Tests for settings loading and validation."""

import pytest

from groqbuilder.exceptions import ConfigurationError, InvalidConfigError
from groqbuilder.settings import GroqBuilderSettings


class TestSettingsDefaults:
    def test_defaults(self, monkeypatch):
        for key in ("LOG_LEVEL", "GROQ_BASE_QUERY", "GROQ_INCLUDE_DRAFTS", "GROQ_DRAFTS_PATH"):
            monkeypatch.delenv(key, raising=False)
        config = GroqBuilderSettings(_env_file=None)
        assert config.LOG_LEVEL == "INFO"
        assert config.GROQ_BASE_QUERY == "*"
        assert config.GROQ_INCLUDE_DRAFTS is False
        assert config.GROQ_DRAFTS_PATH == "drafts.**"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GROQ_BASE_QUERY", "*[_type == 'post']")
        monkeypatch.setenv("GROQ_INCLUDE_DRAFTS", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = GroqBuilderSettings(_env_file=None)
        assert config.GROQ_BASE_QUERY == "*[_type == 'post']"
        assert config.GROQ_INCLUDE_DRAFTS is True
        assert config.LOG_LEVEL == "debug"

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("GROQ_DRAFTS_PATH", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("GROQ_DRAFTS_PATH=staging.**\nUNRELATED=1\n")
        config = GroqBuilderSettings(_env_file=str(env_file))
        assert config.GROQ_DRAFTS_PATH == "staging.**"


class TestSettingsValidation:
    def test_unknown_log_level(self):
        with pytest.raises(InvalidConfigError) as excinfo:
            GroqBuilderSettings(_env_file=None, LOG_LEVEL="LOUD")
        assert excinfo.value.details == {"config_key": "LOG_LEVEL", "value": "LOUD"}

    def test_empty_log_level_allowed(self):
        assert GroqBuilderSettings(_env_file=None, LOG_LEVEL="").LOG_LEVEL == ""

    def test_blank_drafts_path(self):
        with pytest.raises(ConfigurationError):
            GroqBuilderSettings(_env_file=None, GROQ_DRAFTS_PATH="   ")
