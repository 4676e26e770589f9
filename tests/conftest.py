"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from shorts_planner.application.synthesizer import synthesize_plan
from shorts_planner.core.config import OpenAIConfig, Settings
from shorts_planner.domain.entities import GenerationRequest, ProductionPlan


@pytest.fixture(autouse=True)
def _no_ambient_openai_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def finance_brief() -> dict[str, Any]:
    return {"niche": "finance", "tone": "calm", "durationSeconds": 60}


@pytest.fixture
def finance_request(finance_brief: dict[str, Any]) -> GenerationRequest:
    return GenerationRequest.model_validate(finance_brief)


@pytest.fixture
def finance_plan(finance_request: GenerationRequest) -> ProductionPlan:
    return synthesize_plan(finance_request)


@pytest.fixture
def template_settings() -> Settings:
    return Settings(openai=OpenAIConfig(api_key="", _env_file=None), _env_file=None)


@pytest.fixture
def model_settings() -> Settings:
    return Settings(openai=OpenAIConfig(api_key="sk-test", _env_file=None), _env_file=None)
