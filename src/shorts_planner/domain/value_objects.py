"""
Domain Value Objects — immutable, self-validating types.

Value objects represent concepts defined by their attributes rather than
a unique identity. They are always immutable and validate their own invariants.
"""

from __future__ import annotations

from enum import Enum

DEFAULT_PLATFORM = "youtube_shorts"

MIN_DURATION_SECONDS = 15
MAX_DURATION_SECONDS = 120
DEFAULT_DURATION_SECONDS = 60


class Speaker(str, Enum):
    """Who delivers a script segment."""

    ON_CAMERA = "on-camera"
    VOICEOVER = "voiceover"

    @classmethod
    def from_str(cls, value: str) -> Speaker:
        """Parse a speaker role, accepting the legacy host/narrator labels."""
        normalized = value.strip().lower()
        aliases = {"host": cls.ON_CAMERA, "narrator": cls.VOICEOVER}
        if normalized in aliases:
            return aliases[normalized]
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unsupported speaker '{value}'. "
            f"Supported: {', '.join(m.value for m in cls)}"
        )


class Provenance(str, Enum):
    """Where a production plan came from."""

    MODEL = "model"
    DETERMINISTIC = "deterministic"

    @property
    def display_name(self) -> str:
        """Human-readable provenance label."""
        return {
            Provenance.MODEL: "AI generated",
            Provenance.DETERMINISTIC: "Template fallback",
        }[self]
