"""
Plan Synthesizer — deterministic production plan from fixed templates.

Used whenever no model credential is configured. The function is pure:
the same brief always yields the same plan, with no clock, randomness or
I/O involved, so it is safe to call from any number of requests at once.
"""

from __future__ import annotations

import math
import re

from shorts_planner.domain.entities import (
    GenerationRequest,
    OutlineBeat,
    ProductionPlan,
    PublishTiming,
    ScriptSegment,
)
from shorts_planner.domain.value_objects import Speaker

HOOK_BEAT = "Hook"
VALUE_BEAT = "Value Drop"
STEPS_BEAT = "Execution Steps"
CTA_BEAT = "CTA"

MIN_BEAT_SECONDS = 5
MAX_HOOK_SECONDS = 6
MIN_CTA_SECONDS = 4

DEFAULT_CTA = "Encourage viewers to try it today and follow for more quick wins."
DEFAULT_FOLLOW_CAPTION = "Follow for more AI Shorts tactics"

STEP_CAPTIONS = (
    "Step 1: Start today",
    "Step 2: Keep it consistent",
    "Step 3: Share your results",
)

FIXED_HASHTAGS = ("#CreatorTips", "#AIWorkflow")
PLATFORM_HASHTAG = "#YouTubeShorts"

AUTOMATION_CHECKLIST = (
    "Generate storyboard in favorite AI storyboard tool",
    "Use text-to-speech for narration and refine in audio editor",
    "Render b-roll clips with preferred video generator",
    "Assemble timeline in template project",
    "Schedule upload and auto-caption in YouTube Studio",
)

BEST_HOUR_UTC = 16
PUBLISH_RATIONALE = "Optimized for after-school viewing window for global audience."


def resolve_topic(request: GenerationRequest) -> str:
    """Working topic: the trimmed topic, or a niche-based placeholder."""
    topic = (request.topic or "").strip()
    return topic or f"Trending tip in {request.niche}"


def beat_length(duration_seconds: int) -> int:
    """Base beat length, a quarter of the runtime rounded half up, at least 5s."""
    return max(MIN_BEAT_SECONDS, math.floor(duration_seconds / 4 + 0.5))


def build_outline(request: GenerationRequest, topic: str) -> list[OutlineBeat]:
    """Build the four fixed outline beats with their time budgets."""
    duration = request.duration_seconds
    length = beat_length(duration)

    return [
        OutlineBeat(
            beat=HOOK_BEAT,
            detail=f"Pose a bold question about {topic.lower()}.",
            approximate_time=min(MAX_HOOK_SECONDS, length),
        ),
        OutlineBeat(
            beat=VALUE_BEAT,
            detail=f"Reveal a surprising {request.niche.lower()} stat or tactic with fast pacing.",
            approximate_time=length,
        ),
        OutlineBeat(
            beat=STEPS_BEAT,
            detail="Break the tactic into 2-3 punchy steps viewers can follow in under a minute.",
            approximate_time=length,
        ),
        OutlineBeat(
            beat=CTA_BEAT,
            detail=request.call_to_action or DEFAULT_CTA,
            approximate_time=max(MIN_CTA_SECONDS, duration - length * 3),
        ),
    ]


def build_script(outline: list[OutlineBeat], topic: str) -> list[ScriptSegment]:
    """One segment per beat; the hook is spoken on camera."""
    script = []
    for step in outline:
        if step.beat == HOOK_BEAT:
            speaker = Speaker.ON_CAMERA
            text = f"Wait! Are you still ignoring {topic.lower()}? That ends now."
        else:
            speaker = Speaker.VOICEOVER
            text = step.detail
        script.append(
            ScriptSegment(speaker=speaker, text=text, approximate_time=step.approximate_time)
        )
    return script


def build_hashtags(niche: str) -> list[str]:
    niche_tag = re.sub(r"\s+", "", niche)
    tags = [PLATFORM_HASHTAG]
    if niche_tag:
        tags.append(f"#{niche_tag}")
    tags.extend(FIXED_HASHTAGS)
    return tags


def synthesize_plan(request: GenerationRequest) -> ProductionPlan:
    """Expand a normalized brief into a complete production plan.

    Args:
        request: Normalized generation request.

    Returns:
        ProductionPlan built from fixed templates.
    """
    topic = resolve_topic(request)
    outline = build_outline(request, topic)

    captions: list[str] = []
    if request.include_captions:
        captions = [
            f"Hook: {topic}",
            *STEP_CAPTIONS,
            request.call_to_action or DEFAULT_FOLLOW_CAPTION,
        ]

    return ProductionPlan(
        concept_title=f"{topic} ({request.niche} {request.tone})",
        hook=(
            f"You're missing out on {topic.lower()} – "
            f"here's how to fix it in {request.duration_seconds} seconds."
        ),
        outline=outline,
        script=build_script(outline, topic),
        b_roll_prompts=[
            f'Dynamic text animation highlighting "{topic}"',
            "Close-up of creator demonstrating the tactic",
            f"Fast-cut montage related to {request.niche.lower()} results",
        ],
        captions=captions,
        hashtags=build_hashtags(request.niche) if request.include_hashtags else [],
        automation_checklist=list(AUTOMATION_CHECKLIST),
        publish_timing=PublishTiming(best_hour_utc=BEST_HOUR_UTC, rationale=PUBLISH_RATIONALE),
    )
