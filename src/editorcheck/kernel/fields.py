"""The closed set of element fields that have a catalog validator."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class FieldName(str, Enum):
    """Top-level element fields checked by the schema catalog."""

    DATA = "data"
    CSS_PROPERTIES = "cssProperties"
    CSS_CUSTOM_PROPERTIES = "cssCustomProperties"
    STATES = "states"
    DISPLAY_FILTERS = "displayFilters"

    @classmethod
    def from_key(cls, key: str) -> Optional["FieldName"]:
        """Return the member whose value is ``key``, or None for unknown keys."""
        try:
            return cls(key)
        except ValueError:
            return None


KNOWN_FIELDS = frozenset(f.value for f in FieldName)


def field_key(field) -> str:
    """Plain string key for a FieldName member or raw key.

    ``str()`` and f-strings on a ``str``-mixin Enum render the member name on
    current interpreters, so output paths always go through ``.value``.
    """
    return field.value if isinstance(field, FieldName) else str(field)
