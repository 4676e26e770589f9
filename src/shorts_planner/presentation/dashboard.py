"""
Plan Dashboard — read-only Rich rendering of a GenerationResult.

Only the result object is consulted; the provenance badge is derived from
``using_ai`` and nothing else about how the plan was produced.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shorts_planner.domain.entities import GenerationResult


def _bullets(items: list[str], empty: str = "None") -> Text:
    if not items:
        return Text(empty, style="dim")
    return Text("\n".join(f"• {item}" for item in items))


def build_dashboard(result: GenerationResult) -> Group:
    """Build the renderable dashboard for a plan."""
    plan = result.plan
    badge = Text(
        " AI generated " if result.using_ai else " Template fallback ",
        style="bold white on green" if result.using_ai else "bold black on yellow",
    )

    header = Panel(
        Group(Text(plan.concept_title, style="bold"), Text(plan.hook, style="italic"), badge),
        title="🎬 Production Plan",
    )

    outline = Table(title="Outline", expand=True)
    outline.add_column("Beat", style="cyan", no_wrap=True)
    outline.add_column("Detail")
    outline.add_column("Time", justify="right")
    for beat in plan.outline:
        outline.add_row(beat.beat, beat.detail, f"{beat.approximate_time}s")

    script = Table(title="Script", expand=True)
    script.add_column("Speaker", style="magenta", no_wrap=True)
    script.add_column("Text")
    script.add_column("Time", justify="right")
    for segment in plan.script:
        script.add_row(segment.speaker.value, segment.text, f"{segment.approximate_time}s")
    script.caption = f"Total: {plan.total_script_seconds:g}s"

    timing = plan.publish_timing
    return Group(
        header,
        outline,
        script,
        Panel(_bullets(plan.b_roll_prompts), title="B-roll prompts"),
        Panel(_bullets(plan.captions, "Captions disabled"), title="Captions"),
        Panel(Text(" ".join(plan.hashtags) or "Hashtags disabled"), title="Hashtags"),
        Panel(
            Text("\n".join(f"{i}. {step}" for i, step in enumerate(plan.automation_checklist, 1))),
            title="Automation checklist",
        ),
        Panel(Text(f"{timing.best_hour_utc:02d}:00 UTC - {timing.rationale}"), title="Publish timing"),
    )


def render_plan(result: GenerationResult, console: Console | None = None) -> None:
    """Print the dashboard to a console (stdout by default)."""
    (console or Console()).print(build_dashboard(result))
