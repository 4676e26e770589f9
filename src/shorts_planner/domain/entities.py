"""
Domain Entities — the brief coming in and the production plan going out.

Both sides of the planner are Pydantic models so that the same schema
validates user requests, validates untrusted model output, and renders
the camelCase JSON the HTTP clients consume.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from shorts_planner.domain.value_objects import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_PLATFORM,
    MAX_DURATION_SECONDS,
    MIN_DURATION_SECONDS,
    Provenance,
    Speaker,
)


class GenerationRequest(BaseModel):
    """A normalized content brief.

    Attributes:
        niche: Channel niche, e.g. "finance".
        topic: Specific topic for this video, if the creator has one.
        tone: Voice of the video, e.g. "calm" or "energetic".
        goal: What the video should achieve.
        duration_seconds: Target runtime, always within [15, 120].
        platform: Target platform slug.
        call_to_action: Closing line supplied by the creator.
        include_captions: Whether the plan carries caption lines.
        include_hashtags: Whether the plan carries hashtags.
        include_shot_list: Whether the creator wants a shot list.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    niche: str = Field(min_length=2)
    topic: str | None = None
    tone: str = Field(min_length=2)
    goal: str | None = None
    duration_seconds: StrictInt = Field(
        default=DEFAULT_DURATION_SECONDS,
        ge=MIN_DURATION_SECONDS,
        le=MAX_DURATION_SECONDS,
        alias="durationSeconds",
    )
    platform: str = DEFAULT_PLATFORM
    call_to_action: str | None = Field(default=None, alias="callToAction")
    include_captions: StrictBool = Field(default=True, alias="includeCaptions")
    include_hashtags: StrictBool = Field(default=True, alias="includeHashtags")
    include_shot_list: StrictBool = Field(default=True, alias="includeShotList")

    @field_validator("duration_seconds", mode="before")
    @classmethod
    def integral_float_as_int(cls, v: Any) -> Any:
        # JSON has one number type: 60.0 is the integer 60.
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @field_validator("topic", "goal", "call_to_action")
    @classmethod
    def blank_as_missing(cls, v: str | None) -> str | None:
        # Empty form fields mean "not provided".
        if v is None or not v.strip():
            return None
        return v

    def constraints(self) -> dict[str, Any]:
        """Request fields forwarded to the model as generation constraints."""
        return {
            "durationSeconds": self.duration_seconds,
            "niche": self.niche,
            "tone": self.tone,
            "topic": self.topic,
            "goal": self.goal,
            "callToAction": self.call_to_action,
            "platform": self.platform,
            "includeCaptions": self.include_captions,
            "includeHashtags": self.include_hashtags,
            "includeShotList": self.include_shot_list,
        }


class OutlineBeat(BaseModel):
    """One labeled segment of the outline."""

    model_config = ConfigDict(populate_by_name=True)

    beat: str
    detail: str
    approximate_time: int | float = Field(ge=0, alias="approximateTime")


class ScriptSegment(BaseModel):
    """One spoken segment of the script."""

    model_config = ConfigDict(populate_by_name=True)

    speaker: Speaker
    text: str
    approximate_time: int | float = Field(ge=0, alias="approximateTime")

    @field_validator("speaker", mode="before")
    @classmethod
    def parse_speaker(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Speaker.from_str(v)
        return v


class PublishTiming(BaseModel):
    """Recommended publishing hour."""

    model_config = ConfigDict(populate_by_name=True)

    best_hour_utc: int = Field(ge=0, le=23, alias="bestHourUTC")
    rationale: str


class ProductionPlan(BaseModel):
    """A complete short-video production plan."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    concept_title: str = Field(alias="conceptTitle")
    hook: str
    outline: list[OutlineBeat]
    script: list[ScriptSegment]
    b_roll_prompts: list[str] = Field(alias="bRollPrompts")
    captions: list[str]
    hashtags: list[str]
    automation_checklist: list[str] = Field(alias="automationChecklist")
    publish_timing: PublishTiming = Field(alias="publishTiming")

    @property
    def total_script_seconds(self) -> float:
        """Sum of all script segment time budgets."""
        return sum(segment.approximate_time for segment in self.script)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase wire format."""
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True)
class GenerationResult:
    """A production plan tagged with where it came from.

    Attributes:
        plan: The production plan.
        provenance: Model-generated or deterministic.
    """

    plan: ProductionPlan
    provenance: Provenance

    @property
    def using_ai(self) -> bool:
        """True only for plans produced by the external model."""
        return self.provenance is Provenance.MODEL

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the HTTP response body."""
        return {"usingAI": self.using_ai, "plan": self.plan.to_payload()}
