"""
Request Normalizer — turns an untyped request body into a GenerationRequest.

Every violated constraint is reported, not just the first one, and no
generation work happens here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from shorts_planner.domain.entities import GenerationRequest
from shorts_planner.domain.exceptions import FieldViolation, RequestValidationError

log = logging.getLogger(__name__)

_REQUIRED_MESSAGES = {
    "niche": "Niche is required",
    "tone": "Tone is required",
}


def normalize_request(payload: Any) -> GenerationRequest:
    """Validate a raw brief and apply defaults.

    Args:
        payload: Decoded JSON body (or any mapping with the same keys).

    Returns:
        Normalized GenerationRequest.

    Raises:
        RequestValidationError: If any field constraint is violated.
    """
    if not isinstance(payload, Mapping):
        raise RequestValidationError(
            [FieldViolation(field="body", reason="Expected a JSON object")]
        )

    try:
        request = GenerationRequest.model_validate(dict(payload))
    except ValidationError as e:
        violations = _to_violations(e)
        log.debug("Rejected brief: %s", violations)
        raise RequestValidationError(violations, cause=e) from e

    return request


def _to_violations(error: ValidationError) -> list[FieldViolation]:
    violations = []
    for detail in error.errors():
        loc = detail.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        reason = detail.get("msg", "Invalid value")
        if field in _REQUIRED_MESSAGES and detail.get("type") in {"missing", "string_too_short"}:
            reason = _REQUIRED_MESSAGES[field]
        violations.append(FieldViolation(field=field, reason=reason))
    return violations
