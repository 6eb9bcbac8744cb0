"""Tests for the schema catalog and field validators."""

import json

import pytest

from editorcheck.kernel.catalog import (
    FieldValidator,
    SchemaCatalog,
    default_catalog,
    forbid_empty_mapping_at,
)
from editorcheck.kernel.errors import FieldValidationError, UnknownFieldTypeError
from editorcheck.kernel.failure import ValidationFailure
from editorcheck.kernel.fields import FieldName
from editorcheck._internal.schemas import DataItems
from editorcheck.codes import ValidationCode


def test_default_catalog_covers_every_field(catalog):
    assert catalog.fields == frozenset(FieldName)
    assert len(catalog) == 5
    for field in FieldName:
        assert field in catalog
        assert catalog.validator_for(field).field is field


def test_default_catalog_is_built_once():
    assert default_catalog() is default_catalog()


def test_catalog_is_immutable():
    validator = FieldValidator(FieldName.DATA, DataItems)
    source = {FieldName.DATA: validator}
    catalog = SchemaCatalog(source)
    source[FieldName.STATES] = validator  # later changes to the input do not leak in
    assert FieldName.STATES not in catalog
    with pytest.raises(TypeError):
        catalog._validators[FieldName.STATES] = validator


def test_validator_for_unregistered_field_raises():
    catalog = SchemaCatalog({FieldName.DATA: FieldValidator(FieldName.DATA, DataItems)})
    with pytest.raises(UnknownFieldTypeError, match="Unknown field type: states") as excinfo:
        catalog.validator_for(FieldName.STATES)
    assert excinfo.value.code == ValidationCode.UNKNOWN_FIELD_TYPE


def test_field_validation_error_carries_structured_failure(catalog):
    with pytest.raises(FieldValidationError) as excinfo:
        catalog.validator_for(FieldName.DATA).validate({"x": {}})
    error = excinfo.value
    assert error.field is FieldName.DATA
    assert error.failure == ValidationFailure(path=("x", "dataType"), message="Field required")
    assert str(error) == "data.x.dataType: Field required"


def test_forbid_empty_mapping_at_reports_path_and_message():
    check = forbid_empty_mapping_at("props")
    assert check({"a": {"props": {"k": 1}}}) is None
    assert check({"a": {"props": {}}}) == ValidationFailure(path=("a", "props"), message="props object cannot be empty")


@pytest.mark.parametrize("field", list(FieldName))
def test_json_schema_export(catalog, field):
    schema = catalog.validator_for(field).json_schema()
    assert isinstance(schema, dict)
    json.dumps(schema)  # must be serializable


def test_json_schema_uses_json_key_names(catalog):
    schema = json.dumps(catalog.validator_for(FieldName.DATA).json_schema())
    assert "dataType" in schema
    assert "data_type" not in schema
