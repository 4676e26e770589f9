"""
Plan Delivery Service — normalizes a brief and picks the synthesis path.

Flow: raw payload → Normalizer → (model generator | template synthesizer)
      → GenerationResult tagged with provenance

A model failure is reported as a PlanGenerationError; it never falls back
to the template synthesizer, so provenance always tells the truth.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from shorts_planner.application.normalizer import normalize_request
from shorts_planner.application.synthesizer import synthesize_plan
from shorts_planner.core.timer import StepTimer
from shorts_planner.domain.entities import GenerationRequest, GenerationResult, ProductionPlan
from shorts_planner.domain.exceptions import MalformedOutputError, PlanGenerationError
from shorts_planner.domain.ports import PlanGenerator
from shorts_planner.domain.value_objects import Provenance

log = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate automation plan"
TIMEOUT_FAILURE = "Model request timed out"


class PlanDeliveryService:
    """Produces a production plan for a raw brief.

    Args:
        generator: Model-backed plan generator, or None when no model
            credential is configured.
        timeout_seconds: Upper bound on a single model call.
    """

    def __init__(self, generator: PlanGenerator | None = None, timeout_seconds: float = 30.0) -> None:
        self._generator = generator
        self._timeout = timeout_seconds

    @property
    def using_ai(self) -> bool:
        """Whether plans are requested from the external model."""
        return self._generator is not None

    async def deliver(self, payload: Any) -> GenerationResult:
        """Normalize a brief and produce its plan.

        Args:
            payload: Decoded request body.

        Returns:
            GenerationResult tagged with its provenance.

        Raises:
            RequestValidationError: If the brief is invalid; nothing is generated.
            PlanGenerationError: If the model call fails or returns bad output.
        """
        request = normalize_request(payload)

        if self._generator is None:
            log.info("No model credential, using template plan for '%s'", request.niche)
            return GenerationResult(plan=synthesize_plan(request), provenance=Provenance.DETERMINISTIC)

        plan = await self._generate_with_model(self._generator, request)
        return GenerationResult(plan=plan, provenance=Provenance.MODEL)

    async def _generate_with_model(
        self, generator: PlanGenerator, request: GenerationRequest
    ) -> ProductionPlan:
        timer = StepTimer()
        try:
            with timer.step("Model generation"):
                plan = await asyncio.wait_for(generator.generate(request), timeout=self._timeout)
        except MalformedOutputError:
            log.error("Model returned malformed output for '%s'", request.niche)
            raise
        except PlanGenerationError:
            raise
        except asyncio.TimeoutError as e:
            log.error("Model call exceeded %.1fs", self._timeout)
            raise PlanGenerationError(TIMEOUT_FAILURE, cause=e) from e
        except Exception as e:
            log.error("Generation failed: %s", e)
            raise PlanGenerationError(GENERIC_FAILURE, cause=e) from e

        plan = apply_include_flags(plan, request)
        log.info("Model plan for '%s' ready in %.2fs", request.niche, timer.total_elapsed)
        return plan


def apply_include_flags(plan: ProductionPlan, request: GenerationRequest) -> ProductionPlan:
    """Empty the caption and hashtag lists the brief switched off.

    The model is told about the flags but does not always obey them.
    """
    cleared: dict[str, list[str]] = {}
    if not request.include_captions and plan.captions:
        cleared["captions"] = []
    if not request.include_hashtags and plan.hashtags:
        cleared["hashtags"] = []
    if not cleared:
        return plan

    log.warning("Model ignored include flags, dropping %s", ", ".join(sorted(cleared)))
    return plan.model_copy(update=cleared)
