"""
Configuration — type-safe settings via Pydantic BaseSettings.

Loads from environment variables or .env file. The OpenAI group holds
the only credential in the system: when its API key is empty the planner
uses the deterministic template path.

Usage:
    settings = Settings()  # auto-loads from .env
    print(settings.openai.model)
    print(settings.openai.is_configured)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAIConfig(BaseSettings):
    """OpenAI model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr = SecretStr("")
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_output_tokens: int = 1200
    timeout_seconds: float = 30.0
    base_url: str = ""

    @property
    def is_configured(self) -> bool:
        """Check if a model credential is present."""
        return bool(self.api_key.get_secret_value().strip())

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("temperature must be between 0 and 2")
        return v

    @field_validator("max_output_tokens", "timeout_seconds")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be greater than 0")
        return v


class Settings(BaseSettings):
    """Root application settings.

    Load order:
        1. Environment variables
        2. .env file (if present)
        3. Default values

    Usage:
        settings = Settings()
        settings = Settings(_env_file=".env.local")
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.strip().upper()
        if level not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return level

    @classmethod
    def from_env_file(cls, env_file: str | Path) -> Settings:
        """Load settings, including the OpenAI group, from a specific env file."""
        return cls(_env_file=env_file, openai=OpenAIConfig(_env_file=env_file))
