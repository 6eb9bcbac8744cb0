"""Parse raw input and locate the editor element inside it."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .errors import ParseError, StructureError

logger = logging.getLogger(__name__)

MARKER_KEY = "editorElement"

# Component-data root shape: {"items": {<name>: {"dataType": ...}, ...}}
ENVELOPE_ITEMS_KEY = "items"


def _reject_constant(name: str) -> Any:
    # Called for NaN, Infinity and -Infinity
    raise ValueError(f"{name} is not a valid JSON value")


def parse_document(text: str) -> Any:
    """Parse JSON text into a plain tree (dict/list/str/int/float/bool/None).

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected.

    Raises:
        ParseError: If the text is not valid JSON. Never returns a partial tree.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:  # JSONDecodeError is a ValueError
        raise ParseError(f"Invalid JSON: {e}") from e


def find_marker_owner(doc: Any, marker_key: str = MARKER_KEY) -> Optional[Dict[str, Any]]:
    """Return the first mapping carrying ``marker_key``, or None.

    Pre-order depth-first search: a mapping is tested before its children,
    mapping children are visited in key order and sequence children by
    ascending index. Uses an explicit stack so deeply nested documents do not
    hit the recursion limit.
    """
    stack = [doc]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            if marker_key in node:
                return node
            # Reversed so the first key is popped first
            stack.extend(reversed(list(node.values())))
        elif isinstance(node, list):
            stack.extend(reversed(node))
    return None


def _from_envelope(doc: Any) -> Optional[Dict[str, Any]]:
    """Recognize a bare ``{"items": DataItems}`` document as element data."""
    if not isinstance(doc, dict):
        return None
    items = doc.get(ENVELOPE_ITEMS_KEY)
    if not isinstance(items, dict) or not items:
        return None
    if not all(isinstance(item, dict) and "dataType" in item for item in items.values()):
        return None
    return {"data": items}


def locate(doc: Any, marker_key: str = MARKER_KEY) -> Dict[str, Any]:
    """Locate the element document to validate.

    Args:
        doc: Parsed JSON tree
        marker_key: Key whose value is the element document

    Returns:
        The element document (a dict owned by ``doc``, not copied)

    Raises:
        StructureError: If the marker is missing everywhere (and the document
            is not a component-data envelope), or its value is not an object
    """
    owner = find_marker_owner(doc, marker_key)
    if owner is not None:
        element = owner[marker_key]
        if not isinstance(element, dict):
            raise StructureError(f"{marker_key} field must be an object")
        return element

    element = _from_envelope(doc)
    if element is not None:
        logger.debug("No %s marker; using top-level %r envelope", marker_key, ENVELOPE_ITEMS_KEY)
        return element

    raise StructureError(f"{marker_key} field not found")
