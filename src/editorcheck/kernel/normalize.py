"""Render structured failures as canonical error lines."""

from __future__ import annotations

from .failure import ValidationFailure
from .fields import field_key


def format_path(field, failure: ValidationFailure) -> str:
    """Dotted path: field name followed by the failure's keys and indices."""
    return ".".join([field_key(field), *(str(seg) for seg in failure.path)])


def normalize(field, failure: ValidationFailure) -> str:
    """Render ``Field: <dotted.path>. Description: <message>.``

    A trailing period on the message is not doubled.
    """
    description = failure.message.strip().rstrip(".")
    return f"Field: {format_path(field, failure)}. Description: {description}."
