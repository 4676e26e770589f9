"""Tests for domain entities and value objects."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from shorts_planner.domain.entities import (
    GenerationRequest,
    GenerationResult,
    ProductionPlan,
    ScriptSegment,
)
from shorts_planner.domain.value_objects import Provenance, Speaker


class TestSpeaker:
    """Tests for the Speaker value object."""

    def test_values(self) -> None:
        assert Speaker.ON_CAMERA.value == "on-camera"
        assert Speaker.VOICEOVER.value == "voiceover"

    def test_legacy_labels(self) -> None:
        assert Speaker.from_str("host") == Speaker.ON_CAMERA
        assert Speaker.from_str(" Narrator ") == Speaker.VOICEOVER

    def test_from_str_invalid(self) -> None:
        with pytest.raises(ValueError, match="Unsupported speaker"):
            Speaker.from_str("audience")

    def test_segment_accepts_legacy_label(self) -> None:
        segment = ScriptSegment.model_validate(
            {"speaker": "host", "text": "Hi", "approximateTime": 5}
        )
        assert segment.speaker == Speaker.ON_CAMERA


class TestGenerationRequest:
    """Tests for the GenerationRequest entity."""

    def test_defaults(self) -> None:
        request = GenerationRequest.model_validate({"niche": "finance", "tone": "calm"})
        assert request.duration_seconds == 60
        assert request.platform == "youtube_shorts"
        assert request.include_captions is True
        assert request.include_hashtags is True
        assert request.include_shot_list is True
        assert request.topic is None
        assert request.call_to_action is None

    def test_blank_optional_text_is_missing(self) -> None:
        request = GenerationRequest.model_validate(
            {"niche": "finance", "tone": "calm", "topic": "  ", "callToAction": ""}
        )
        assert request.topic is None
        assert request.call_to_action is None

    def test_accepts_field_names(self) -> None:
        request = GenerationRequest(niche="finance", tone="calm", duration_seconds=30)
        assert request.duration_seconds == 30

    def test_is_immutable(self) -> None:
        request = GenerationRequest(niche="finance", tone="calm")
        with pytest.raises(ValidationError):
            request.niche = "crypto"  # type: ignore[misc]

    def test_constraints_use_wire_names(self) -> None:
        request = GenerationRequest(niche="finance", tone="calm", goal="grow")
        constraints = request.constraints()
        assert constraints["durationSeconds"] == 60
        assert constraints["goal"] == "grow"
        assert constraints["includeShotList"] is True


class TestProductionPlan:
    """Tests for the ProductionPlan entity."""

    def test_payload_uses_camel_case(self, finance_plan: ProductionPlan) -> None:
        payload = finance_plan.to_payload()
        assert set(payload) == {
            "conceptTitle",
            "hook",
            "outline",
            "script",
            "bRollPrompts",
            "captions",
            "hashtags",
            "automationChecklist",
            "publishTiming",
        }
        assert payload["publishTiming"]["bestHourUTC"] == 16
        assert payload["script"][0]["speaker"] == "on-camera"
        assert payload["outline"][0]["approximateTime"] == 6

    def test_round_trip_from_payload(self, finance_plan: ProductionPlan) -> None:
        assert ProductionPlan.model_validate(finance_plan.to_payload()) == finance_plan

    def test_rejects_out_of_range_hour(self, finance_plan: ProductionPlan) -> None:
        payload = finance_plan.to_payload()
        payload["publishTiming"]["bestHourUTC"] = 24
        with pytest.raises(ValidationError):
            ProductionPlan.model_validate(payload)

    def test_total_script_seconds(self, finance_plan: ProductionPlan) -> None:
        assert finance_plan.total_script_seconds == 51


class TestGenerationResult:
    """Tests for the GenerationResult wrapper."""

    def test_deterministic_is_not_ai(self, finance_plan: ProductionPlan) -> None:
        result = GenerationResult(plan=finance_plan, provenance=Provenance.DETERMINISTIC)
        assert result.using_ai is False
        assert result.to_payload()["usingAI"] is False

    def test_model_is_ai(self, finance_plan: ProductionPlan) -> None:
        result = GenerationResult(plan=finance_plan, provenance=Provenance.MODEL)
        payload = result.to_payload()
        assert payload["usingAI"] is True
        assert payload["plan"]["conceptTitle"] == finance_plan.concept_title
