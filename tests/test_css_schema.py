"""Tests for the ``cssProperties`` and ``cssCustomProperties`` validators."""

import pytest

from editorcheck.kernel.errors import FieldValidationError
from editorcheck.kernel.fields import FieldName

CSS_FIELDS = [FieldName.CSS_PROPERTIES, FieldName.CSS_CUSTOM_PROPERTIES]


def _failure(validator, value):
    with pytest.raises(FieldValidationError) as excinfo:
        validator.validate(value)
    return excinfo.value.failure


@pytest.mark.parametrize("field", CSS_FIELDS)
def test_empty_item_is_valid(catalog, field):
    assert catalog.validator_for(field).validate({"color": {}}) == {"color": {}}


@pytest.mark.parametrize("field", CSS_FIELDS)
def test_unknown_keys_kept(catalog, field):
    value = {"color": {"defaultValue": "red", "vendorHint": {"x": 1}}}
    assert catalog.validator_for(field).validate(value) == value


@pytest.mark.parametrize("field", CSS_FIELDS)
def test_states_default_values_cannot_be_empty(catalog, field):
    failure = _failure(catalog.validator_for(field), {"color": {"statesDefaultValues": {}}})
    assert failure.path == ("color", "statesDefaultValues")
    assert failure.message == "statesDefaultValues object cannot be empty"


@pytest.mark.parametrize("field", CSS_FIELDS)
def test_nested_states_default_values_checked(catalog, field):
    value = {"color": {"variants": {"dark": {"statesDefaultValues": {}}}}}
    failure = _failure(catalog.validator_for(field), value)
    assert failure.path == ("color", "variants", "dark", "statesDefaultValues")


@pytest.mark.parametrize("field", CSS_FIELDS)
def test_empty_mapping_elsewhere_is_fine(catalog, field):
    value = {"color": {"defaultValue": {}, "statesDefaultValues": {"hover": {}}}}
    assert catalog.validator_for(field).validate(value) == value


def test_empty_css_properties_rejected(catalog):
    failure = _failure(catalog.validator_for(FieldName.CSS_PROPERTIES), {})
    assert failure.path == ()
    assert failure.message == "CSS properties object cannot be empty"


def test_empty_css_custom_properties_rejected(catalog):
    failure = _failure(catalog.validator_for(FieldName.CSS_CUSTOM_PROPERTIES), {})
    assert failure.message == "CSS custom properties object cannot be empty"


def test_display_values_enumeration(catalog):
    validator = catalog.validator_for(FieldName.CSS_PROPERTIES)
    value = {"display": {"display": {"displayValues": ["flex", "none"]}}}
    assert validator.validate(value) == value

    failure = _failure(validator, {"display": {"display": {"displayValues": ["table"]}}})
    assert failure.path == ("display", "display", "displayValues", 0)


def test_background_modes_enumeration(catalog):
    validator = catalog.validator_for(FieldName.CSS_PROPERTIES)
    failure = _failure(validator, {"bg": {"background": {"backgroundModes": ["pattern"]}}})
    assert failure.path == ("bg", "background", "backgroundModes", 0)


def test_number_bounds(catalog):
    validator = catalog.validator_for(FieldName.CSS_CUSTOM_PROPERTIES)
    failure = _failure(validator, {"--gap": {"number": {"minimum": "0"}}})
    assert failure.path == ("--gap", "number", "minimum")
    assert failure.message == "Input should be a number"


def test_schema_error_reported_before_invariant(catalog):
    validator = catalog.validator_for(FieldName.CSS_PROPERTIES)
    failure = _failure(validator, {"a": {"statesDefaultValues": {}}, "b": {"displayName": 7}})
    assert failure.path == ("b", "displayName")
