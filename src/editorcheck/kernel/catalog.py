"""Schema catalog: one immutable validator per element field."""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from editorcheck._internal.schemas import (
    CssCustomProperties,
    CssProperties,
    DataItems,
    DisplayFilters,
    States,
)
from .errors import FieldValidationError, UnknownFieldTypeError
from .failure import ValidationFailure, failure_from_validation_error
from .fields import FieldName, field_key
from .tree_walk import empty_mapping_at, find_violation

logger = logging.getLogger(__name__)

# An invariant inspects the decoded (JSON-compatible) value of one field
Invariant = Callable[[Any], Optional[ValidationFailure]]


def forbid_empty_mapping_at(segment: str) -> Invariant:
    """Invariant: no empty mapping may sit under a key named ``segment``.

    Empty mappings stay legal everywhere else in the tree.
    """
    predicate = empty_mapping_at(segment)

    def _check(tree: Any) -> Optional[ValidationFailure]:
        path = find_violation(tree, predicate)
        if path is None:
            return None
        return ValidationFailure(path=path, message=f"{segment} object cannot be empty")

    return _check


class FieldValidator:
    """Validator for one element field.

    Decodes the raw value with a pydantic TypeAdapter, dumps it back to
    JSON-compatible data (only keys the input actually set), then runs the
    field's invariants over the dumped tree. Stateless; safe to call from
    concurrent tasks.
    """

    def __init__(self, field: FieldName, schema: Any, invariants: Iterable[Invariant] = ()):
        self.field = field
        self._adapter = TypeAdapter(schema)
        self._invariants = tuple(invariants)

    def validate(self, value: Any) -> Any:
        """Return the validated value.

        Raises:
            FieldValidationError: With a single structured failure
        """
        try:
            decoded = self._adapter.validate_python(value)
        except ValidationError as e:
            raise FieldValidationError(self.field, failure_from_validation_error(e, value)) from e

        result = self._adapter.dump_python(decoded, mode="json", by_alias=True, exclude_unset=True)

        for invariant in self._invariants:
            failure = invariant(result)
            if failure is not None:
                raise FieldValidationError(self.field, failure)
        return result

    def json_schema(self) -> Dict[str, Any]:
        """JSON Schema of the structural part (invariants are not expressible)."""
        return self._adapter.json_schema(by_alias=True)

    def __repr__(self) -> str:
        return f"FieldValidator({field_key(self.field)!r})"


class SchemaCatalog:
    """Immutable mapping FieldName -> FieldValidator.

    Passed explicitly to the engine so callers (and tests) can substitute
    their own catalog.
    """

    def __init__(self, validators: Mapping[FieldName, FieldValidator]):
        self._validators = MappingProxyType(dict(validators))

    def validator_for(self, field: FieldName) -> FieldValidator:
        """Return the validator registered for ``field``.

        Raises:
            UnknownFieldTypeError: If nothing is registered for ``field``
        """
        try:
            return self._validators[field]
        except KeyError:
            raise UnknownFieldTypeError(field) from None

    @property
    def fields(self) -> frozenset:
        return frozenset(self._validators)

    def __contains__(self, field: object) -> bool:
        return field in self._validators

    def __iter__(self) -> Iterator[FieldName]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)


def build_default_validators() -> Dict[FieldName, FieldValidator]:
    """Validators for the five element fields."""
    states_default_values = forbid_empty_mapping_at("statesDefaultValues")
    return {
        FieldName.DATA: FieldValidator(FieldName.DATA, DataItems),
        FieldName.CSS_PROPERTIES: FieldValidator(
            FieldName.CSS_PROPERTIES, CssProperties, [states_default_values]
        ),
        FieldName.CSS_CUSTOM_PROPERTIES: FieldValidator(
            FieldName.CSS_CUSTOM_PROPERTIES, CssCustomProperties, [states_default_values]
        ),
        FieldName.STATES: FieldValidator(
            FieldName.STATES, States, [forbid_empty_mapping_at("props")]
        ),
        FieldName.DISPLAY_FILTERS: FieldValidator(FieldName.DISPLAY_FILTERS, DisplayFilters),
    }


@lru_cache(maxsize=None)
def default_catalog() -> SchemaCatalog:
    """Process-wide default catalog, built on first use."""
    logger.debug("Building default schema catalog")
    return SchemaCatalog(build_default_validators())
