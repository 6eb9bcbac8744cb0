"""Public API for editorcheck.

High-level functions that take raw JSON text (or an already-parsed value)
and return a complete ValidationResult. Fatal conditions (ParseError,
StructureError) are raised before any field is validated; per-field
rejections are always collected into the result.
"""

import asyncio
import json
import logging
from typing import Any, Optional

from editorcheck.kernel.aggregate import ValidationResult, aggregate
from editorcheck.kernel.catalog import SchemaCatalog, default_catalog
from editorcheck.kernel.locator import MARKER_KEY, locate, parse_document
from editorcheck.kernel.partition import partition
from editorcheck.kernel.runner import validate_all

logger = logging.getLogger(__name__)


async def validate_document_async(
    doc: Any,
    catalog: Optional[SchemaCatalog] = None,
    marker_key: str = MARKER_KEY,
) -> ValidationResult:
    """
    Validate the element document found inside an already-parsed tree.

    Args:
        doc: Parsed JSON value (not mutated)
        catalog: Schema catalog to validate against (defaults to the built-in one)
        marker_key: Key that marks the element document

    Returns:
        ValidationResult. ``original`` is ``doc`` itself on success.

    Raises:
        StructureError: If the element document cannot be located
    """
    if catalog is None:
        catalog = default_catalog()

    element = locate(doc, marker_key)
    parts = partition(element)
    if parts.ignored:
        logger.debug("Passing through unknown field(s): %s", ", ".join(parts.ignored))

    outcomes = await validate_all(parts.known, catalog)
    return aggregate(outcomes, doc, parts.ignored)


async def validate_text_async(
    text: str,
    catalog: Optional[SchemaCatalog] = None,
    marker_key: str = MARKER_KEY,
) -> ValidationResult:
    """
    Parse ``text`` as JSON and validate the element document inside it.

    Raises:
        ParseError: If ``text`` is not valid JSON
        StructureError: If the element document cannot be located
    """
    doc = parse_document(text)
    return await validate_document_async(doc, catalog=catalog, marker_key=marker_key)


def validate_document(
    doc: Any,
    catalog: Optional[SchemaCatalog] = None,
    marker_key: str = MARKER_KEY,
) -> ValidationResult:
    """Blocking wrapper around :func:`validate_document_async`."""
    return asyncio.run(validate_document_async(doc, catalog=catalog, marker_key=marker_key))


def validate_text(
    text: str,
    catalog: Optional[SchemaCatalog] = None,
    marker_key: str = MARKER_KEY,
) -> ValidationResult:
    """Blocking wrapper around :func:`validate_text_async`."""
    return asyncio.run(validate_text_async(text, catalog=catalog, marker_key=marker_key))


def format_result(result: ValidationResult, indent: int = 2) -> str:
    """Display text: validated fields as JSON on success, one error line per field otherwise."""
    if result.ok:
        return json.dumps(result.field_results, indent=indent, ensure_ascii=False)
    return "\n".join(result.errors)
