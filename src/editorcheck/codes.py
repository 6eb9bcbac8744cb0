"""Error code constants for editorcheck.

These constants prevent stringly-typed error codes and ensure
client code uses the correct codes when inspecting failures.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Validation error codes."""

    # Fatal (abort the request before any field is validated)
    PARSE_ERROR = "PARSE_ERROR"
    STRUCTURE_ERROR = "STRUCTURE_ERROR"

    # Internal (should be unreachable through the public API)
    UNKNOWN_FIELD_TYPE = "UNKNOWN_FIELD_TYPE"

    # Per-field (collected, never abort sibling fields)
    FIELD_VALIDATION_FAILED = "FIELD_VALIDATION_FAILED"
