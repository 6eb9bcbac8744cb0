"""Structured validation failures.

A failure is always one path plus one message. Pydantic may report several
errors for a single field (one per offending item, or one per union branch);
``failure_from_validation_error`` picks exactly one of them deterministically.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple, Union

from pydantic import ValidationError

PathSegment = Union[str, int]

# Decoration pydantic prepends to messages raised from custom validators
_MESSAGE_PREFIXES = ("Value error, ", "Assertion failed, ")

# Marker pydantic appends after a dict key that failed key validation
DICT_KEY_MARKER = "[key]"

# Schema tags pydantic inserts for union members and validator wrappers,
# e.g. ``function-after[_check(), str]``, ``list[str]``, ``tagged-union[...]``
_SCHEMA_TAG_RE = re.compile(r"^[a-z][a-z0-9_-]*\[.*\]$")

_UNRESOLVED = object()


@dataclass(frozen=True)
class ValidationFailure:
    """Where (path from the field root) and why (message) a field was rejected."""
    path: Tuple[PathSegment, ...]
    message: str


def is_schema_tag(segment: PathSegment) -> bool:
    """True for location segments pydantic adds for its own bookkeeping."""
    if not isinstance(segment, str):
        return False
    return segment == DICT_KEY_MARKER or _SCHEMA_TAG_RE.match(segment) is not None


def resolve_path(loc: Iterable[PathSegment], value: Any = _UNRESOLVED) -> Tuple[PathSegment, ...]:
    """Turn a pydantic location into a path through the input document.

    Each segment is looked up in the input node it addresses. A segment that
    exists there is a user key or index and is always kept, whatever
    characters it contains. A segment that does not resolve is kept too
    (e.g. a missing required field) unless it is a pydantic schema tag.
    """
    path = []
    node = value
    for segment in loc:
        if isinstance(node, dict) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            node = node[segment]
        elif is_schema_tag(segment):
            continue
        else:
            node = _UNRESOLVED
        path.append(segment)
    return tuple(path)


def clean_message(message: str) -> str:
    """Strip validator decoration so only the human-readable cause remains."""
    for prefix in _MESSAGE_PREFIXES:
        if message.startswith(prefix):
            return message[len(prefix):]
    return message


def failure_from_errors(errors: Iterable[Mapping], value: Any = _UNRESOLVED) -> ValidationFailure:
    """Reduce a pydantic error list to a single failure.

    ``value`` is the input that was validated; when given, location segments
    are resolved against it so user keys are never mistaken for schema tags.

    Tie-break: deepest location wins (most path segments after dropping
    schema tags); among equally deep errors the first reported wins.
    """
    best = None
    best_path: Tuple[PathSegment, ...] = ()
    for error in errors:
        path = resolve_path(error.get("loc", ()), value)
        if best is None or len(path) > len(best_path):
            best, best_path = error, path
    if best is None:
        return ValidationFailure(path=(), message="Invalid value")
    return ValidationFailure(path=best_path, message=clean_message(str(best.get("msg", ""))))


def failure_from_validation_error(exc: ValidationError, value: Any = _UNRESOLVED) -> ValidationFailure:
    """Convert a pydantic ValidationError into one structured failure."""
    return failure_from_errors(exc.errors(include_url=False), value)
