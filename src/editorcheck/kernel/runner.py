"""Run every known field through its catalog validator concurrently."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .catalog import SchemaCatalog
from .errors import FieldValidationError
from .failure import ValidationFailure
from .fields import FieldName, field_key
from .normalize import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldOutcome:
    """Success (``value``) or failure (``failure`` + normalized ``error``) for one field."""
    field: FieldName
    value: Any = None
    failure: Optional[ValidationFailure] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def succeeded(cls, field: FieldName, value: Any) -> "FieldOutcome":
        return cls(field=field, value=value)

    @classmethod
    def failed(cls, field: FieldName, failure: ValidationFailure) -> "FieldOutcome":
        return cls(field=field, failure=failure, error=normalize(field, failure))


async def validate_field(field: FieldName, value: Any, catalog: SchemaCatalog) -> FieldOutcome:
    """Validate one field, capturing a schema rejection as a failed outcome.

    Raises:
        UnknownFieldTypeError: If the catalog has no validator for ``field``
    """
    validator = catalog.validator_for(field)
    try:
        result = validator.validate(value)
    except FieldValidationError as e:
        outcome = FieldOutcome.failed(field, e.failure)
        logger.debug("Field %s rejected: %s", field_key(field), outcome.error)
        return outcome
    logger.debug("Field %s accepted", field_key(field))
    return FieldOutcome.succeeded(field, result)


async def validate_all(
    known: Mapping[FieldName, Any],
    catalog: SchemaCatalog,
) -> Dict[FieldName, FieldOutcome]:
    """Validate every field in ``known`` as an independent task.

    Waits for all tasks to settle; a failing field never cancels or hides a
    sibling. Concurrency is cooperative: validation is pure CPU work with no
    await points, so each task runs to completion in a single step and the
    tasks execute one after another on the event loop.

    Schema rejections become failed outcomes. Anything else (e.g.
    UnknownFieldTypeError) is a programming error and is re-raised once every
    task has settled.

    Returns:
        Outcomes keyed by field, in settlement order. Settlement order is not
        guaranteed; callers must not rely on it.
    """
    settled: Dict[FieldName, FieldOutcome] = {}

    async def _run(field: FieldName, value: Any) -> None:
        settled[field] = await validate_field(field, value, catalog)

    tasks = [
        asyncio.create_task(_run(field, value), name=f"validate:{field_key(field)}")
        for field, value in known.items()
    ]
    logger.debug("Dispatched %d field validation(s)", len(tasks))
    results = await asyncio.gather(*tasks, return_exceptions=True)

    for result in results:
        if isinstance(result, BaseException):
            raise result
    return settled
