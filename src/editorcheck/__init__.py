"""editorcheck: batch field validation for editor element configuration JSON."""

import logging
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("editorcheck")
except PackageNotFoundError:
    __version__ = "dev"

# Library default: silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API exports
from editorcheck.api import (
    format_result,
    validate_document,
    validate_document_async,
    validate_text,
    validate_text_async,
)
from editorcheck.codes import ValidationCode
from editorcheck.kernel.aggregate import ValidationResult
from editorcheck.kernel.catalog import FieldValidator, SchemaCatalog, default_catalog
from editorcheck.kernel.errors import (
    EditorCheckError,
    ParseError,
    StructureError,
    UnknownFieldTypeError,
)
from editorcheck.kernel.fields import FieldName

__all__ = [
    "__version__",
    "validate_text",
    "validate_text_async",
    "validate_document",
    "validate_document_async",
    "format_result",
    "ValidationResult",
    "ValidationCode",
    "FieldName",
    "FieldValidator",
    "SchemaCatalog",
    "default_catalog",
    "EditorCheckError",
    "ParseError",
    "StructureError",
    "UnknownFieldTypeError",
]
