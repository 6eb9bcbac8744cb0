"""Error taxonomy for element validation."""

from __future__ import annotations

from editorcheck.codes import ValidationCode
from editorcheck.kernel.fields import field_key


class EditorCheckError(Exception):
    """Base exception for editorcheck errors."""
    code: ValidationCode = ValidationCode.FIELD_VALIDATION_FAILED

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParseError(EditorCheckError):
    """Raised when input text is not valid JSON."""
    code = ValidationCode.PARSE_ERROR


class StructureError(EditorCheckError):
    """Raised when the element document cannot be located or is not an object."""
    code = ValidationCode.STRUCTURE_ERROR


class UnknownFieldTypeError(EditorCheckError):
    """Raised when a field without a catalog validator is dispatched."""
    code = ValidationCode.UNKNOWN_FIELD_TYPE

    def __init__(self, field):
        self.field = field
        super().__init__(f"Unknown field type: {field_key(field)}")


class FieldValidationError(EditorCheckError):
    """Raised by a catalog validator when one field's value is rejected.

    Carries the structured failure (path relative to the field root plus
    message) so the normalizer never has to scrape rendered text.
    """
    code = ValidationCode.FIELD_VALIDATION_FAILED

    def __init__(self, field, failure):
        self.field = field
        self.failure = failure
        where = ".".join([field_key(field), *(str(seg) for seg in failure.path)])
        super().__init__(f"{where}: {failure.message}")
