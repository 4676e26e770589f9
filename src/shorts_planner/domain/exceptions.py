"""
Domain Exceptions — typed error hierarchy for the planner.

Each stage has its own exception type so the presentation layer can map
failures to the right response without inspecting messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class PlannerError(Exception):
    """Base exception for all planner errors."""

    def __init__(self, message: str, stage: str = "", cause: Exception | None = None):
        self.stage = stage
        self.cause = cause
        super().__init__(message)


class ConfigurationError(PlannerError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, stage="configuration", cause=cause)


@dataclass(frozen=True)
class FieldViolation:
    """A single violated request constraint."""

    field: str
    reason: str


class RequestValidationError(PlannerError):
    """Raised when a brief violates one or more field constraints.

    Attributes:
        violations: Every violated constraint, in field order.
    """

    def __init__(self, violations: list[FieldViolation], cause: Exception | None = None):
        self.violations = violations
        fields = ", ".join(sorted({v.field for v in violations}))
        super().__init__(f"Invalid request: {fields}", stage="validation", cause=cause)

    @property
    def fields(self) -> set[str]:
        """Names of the fields that failed validation."""
        return {v.field for v in self.violations}

    def flatten(self) -> dict[str, Any]:
        """Group violations into form-level and per-field messages."""
        form_errors: list[str] = []
        field_errors: dict[str, list[str]] = {}
        for violation in self.violations:
            if violation.field == "body":
                form_errors.append(violation.reason)
            else:
                field_errors.setdefault(violation.field, []).append(violation.reason)
        return {"formErrors": form_errors, "fieldErrors": field_errors}


class PlanGenerationError(PlannerError):
    """Raised when the external model fails to produce a plan."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, stage="plan_generation", cause=cause)


class MalformedOutputError(PlanGenerationError):
    """Raised when the model's response does not parse as a production plan."""

    def __init__(self, message: str = "Model returned malformed output", cause: Exception | None = None):
        super().__init__(message, cause=cause)
