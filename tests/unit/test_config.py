"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from shorts_planner.core.config import OpenAIConfig, Settings


class TestOpenAIConfig:
    """Tests for the OpenAI settings group."""

    def test_defaults(self) -> None:
        config = OpenAIConfig(_env_file=None)
        assert config.model == "gpt-4o-mini"
        assert config.temperature == 0.7
        assert config.max_output_tokens == 1200
        assert not config.is_configured

    def test_key_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        config = OpenAIConfig(_env_file=None)
        assert config.is_configured
        assert config.api_key.get_secret_value() == "sk-env"

    def test_blank_key_is_not_configured(self) -> None:
        assert not OpenAIConfig(api_key="   ", _env_file=None).is_configured

    def test_key_is_not_leaked_in_repr(self) -> None:
        config = OpenAIConfig(api_key="sk-secret", _env_file=None)
        assert "sk-secret" not in repr(config)

    def test_invalid_temperature(self) -> None:
        with pytest.raises(ValidationError, match="temperature"):
            OpenAIConfig(temperature=3.5, _env_file=None)

    def test_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            OpenAIConfig(timeout_seconds=0, _env_file=None)


class TestSettings:
    """Tests for root settings."""

    def test_log_level_normalized(self) -> None:
        settings = Settings(log_level="debug", _env_file=None)
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="chatty", _env_file=None)

    def test_from_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=sk-file\nOPENAI_MODEL=gpt-4o\nPORT=9000\n")

        settings = Settings.from_env_file(env_file)

        assert settings.openai.is_configured
        assert settings.openai.model == "gpt-4o"
        assert settings.port == 9000
