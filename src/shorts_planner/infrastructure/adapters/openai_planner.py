"""
OpenAI Adapter — PlanGenerator implementation backed by the Responses API.

Sends a system instruction plus a user message that embeds the plan's JSON
schema and the brief's constraints, then treats the reply as untrusted:
the text must parse as JSON and validate against ProductionPlan before it
leaves this module.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any

from openai import AsyncOpenAI
from pydantic import ValidationError

from shorts_planner.domain.entities import GenerationRequest, ProductionPlan
from shorts_planner.domain.exceptions import ConfigurationError, MalformedOutputError
from shorts_planner.domain.ports import PlanGenerator

if TYPE_CHECKING:
    from shorts_planner.core.config import Settings

log = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """
You are an experienced short-form video strategist helping a creator automate production for AI-generated YouTube Shorts.
Always respond with JSON that matches the schema provided by the user. Ensure timings add up to the requested duration.
Keep language concise, energetic, and accessible for global audiences.
"""

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def build_user_message(request: GenerationRequest) -> str:
    """Serialize the plan schema and the brief's constraints for the model."""
    return json.dumps({
        "schema": ProductionPlan.model_json_schema(by_alias=True),
        "constraints": request.constraints(),
    })


def parse_plan(text: str | None) -> ProductionPlan:
    """Parse model output into a validated ProductionPlan.

    Args:
        text: Raw text returned by the model.

    Returns:
        Validated ProductionPlan.

    Raises:
        MalformedOutputError: If the text is not JSON or does not fit the schema.
    """
    if not text or not text.strip():
        raise MalformedOutputError()

    content = text.strip()
    fenced = _FENCE_RE.match(content)
    if fenced:
        content = fenced.group(1)

    try:
        data = json.loads(content)
        return ProductionPlan.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        log.warning("Model output rejected: %s", e)
        raise MalformedOutputError(cause=e) from e


class OpenAIPlanGenerator(PlanGenerator):
    """Plan generator that calls an OpenAI model.

    The client is created with retries disabled and a hard request timeout.
    """

    def __init__(self, settings: Settings, client: Any | None = None) -> None:
        config = settings.openai
        if not config.is_configured:
            raise ConfigurationError("OPENAI_API_KEY is not set")

        self._model = config.model
        self._temperature = config.temperature
        self._max_output_tokens = config.max_output_tokens
        self._client = client or AsyncOpenAI(
            api_key=config.api_key.get_secret_value(),
            base_url=config.base_url or None,
            timeout=config.timeout_seconds,
            max_retries=0,
        )

    async def generate(self, request: GenerationRequest) -> ProductionPlan:
        """Ask the model for a plan and validate its reply."""
        log.info("Requesting plan from %s (%ds, %s)", self._model, request.duration_seconds, request.niche)

        response = await self._client.responses.create(
            model=self._model,
            temperature=self._temperature,
            max_output_tokens=self._max_output_tokens,
            input=[
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": build_user_message(request)},
            ],
        )

        return parse_plan(response.output_text)
