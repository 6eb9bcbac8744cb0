"""Combine per-field outcomes into one all-or-nothing result."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from pydantic import BaseModel, Field

from .fields import FieldName, field_key
from .runner import FieldOutcome

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    """Result of validating one element document.

    On success ``field_results`` holds every validated field and ``original``
    the parsed input. On failure both are empty: partial success is never
    surfaced, only one normalized error line per failing field.
    """
    ok: bool
    field_results: Dict[str, Any] = Field(default_factory=dict)
    original: Any = None
    errors: List[str] = Field(default_factory=list)  # order follows settlement, not field name
    ignored_fields: List[str] = Field(default_factory=list)  # informational, never validated


def aggregate(
    outcomes: Mapping[FieldName, FieldOutcome],
    original: Any,
    ignored: Iterable[str] = (),
) -> ValidationResult:
    """Fan-in: Success if every outcome succeeded, else Failure listing each failing field."""
    ignored_fields = list(ignored)
    errors = [outcome.error for outcome in outcomes.values() if not outcome.ok]

    if errors:
        logger.info("Validation failed: %d of %d field(s) invalid", len(errors), len(outcomes))
        return ValidationResult(ok=False, errors=errors, ignored_fields=ignored_fields)

    field_results = {field_key(field): outcome.value for field, outcome in outcomes.items()}
    logger.info("Validation succeeded: %d field(s) valid", len(field_results))
    return ValidationResult(
        ok=True,
        field_results=field_results,
        original=original,
        ignored_fields=ignored_fields,
    )
