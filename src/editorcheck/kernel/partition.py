"""Split an element document into catalog fields and pass-through keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from .fields import FieldName


@dataclass(frozen=True)
class Partition:
    """Top-level keys of an element document, split by catalog membership.

    ``known`` keeps document order. ``ignored`` keys are never validated and
    never reported; they survive only through the original document.
    """
    known: Dict[FieldName, Any]
    ignored: Tuple[str, ...]


def partition(doc: Mapping[str, Any]) -> Partition:
    """Split ``doc`` by membership in the closed FieldName set (top-level only)."""
    known: Dict[FieldName, Any] = {}
    ignored = []
    for key, value in doc.items():
        field = FieldName.from_key(key)
        if field is None:
            ignored.append(key)
        else:
            known[field] = value
    return Partition(known=known, ignored=tuple(ignored))
