"""Tests for locating the element document inside a parsed tree."""

import pytest

from editorcheck.kernel.errors import ParseError, StructureError
from editorcheck.kernel.locator import find_marker_owner, locate, parse_document
from editorcheck.codes import ValidationCode


def test_parse_document_valid():
    assert parse_document('{"a": [1, 2.5, null, true]}') == {"a": [1, 2.5, None, True]}


def test_parse_document_malformed_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_document("{not json")
    assert excinfo.value.message.startswith("Invalid JSON:")
    assert excinfo.value.code == ValidationCode.PARSE_ERROR


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_parse_document_rejects_non_standard_constants(literal):
    with pytest.raises(ParseError) as excinfo:
        parse_document('{"minimum": %s}' % literal)
    assert excinfo.value.message == f"Invalid JSON: {literal} is not a valid JSON value"


def test_locate_top_level_marker():
    element = {"data": {}}
    assert locate({"editorElement": element}) is element


def test_locate_nested_in_mappings_and_sequences():
    element = {"states": {"hover": {}}}
    doc = {"meta": {"version": 1}, "payload": [{"skip": True}, {"wrapper": {"editorElement": element}}]}
    assert locate(doc) is element


def test_locate_first_match_in_document_order_wins():
    first = {"data": {"a": {"dataType": "text"}}}
    second = {"data": {"b": {"dataType": "text"}}}
    doc = {"one": {"editorElement": first}, "two": {"editorElement": second}}
    assert locate(doc) is first


def test_locate_sequence_visited_by_ascending_index():
    first = {"x": 1}
    second = {"x": 2}
    doc = [[{"editorElement": first}], {"editorElement": second}]
    assert locate(doc) is first


def test_locate_stops_at_outer_match():
    """Pre-order: the mapping carrying the marker wins over deeper markers inside it."""
    inner = {"data": {}}
    outer = {"editorElement": inner}
    inner["nested"] = {"editorElement": {"deeper": True}}
    assert locate(outer) is inner


def test_locate_deeply_nested_marker_without_recursion_error():
    element = {"data": {"x": {"dataType": "text"}}}
    doc = {"editorElement": element}
    for _ in range(5000):
        doc = [doc]
    assert locate(doc) is element


def test_marker_value_not_object_raises():
    with pytest.raises(StructureError, match="editorElement field must be an object"):
        locate({"editorElement": ["not", "an", "object"]})


def test_marker_missing_raises_not_found():
    with pytest.raises(StructureError, match="editorElement field not found") as excinfo:
        locate({"something": {"else": [1, 2, 3]}})
    assert excinfo.value.code == ValidationCode.STRUCTURE_ERROR


def test_scalar_document_raises_not_found():
    with pytest.raises(StructureError):
        locate(42)


def test_custom_marker_key():
    element = {"data": {}}
    assert locate({"element": element}, marker_key="element") is element
    with pytest.raises(StructureError, match="element field must be an object"):
        locate({"element": "x"}, marker_key="element")


def test_component_data_envelope_recognized():
    items = {"title": {"dataType": "text"}, "count": {"dataType": "number"}}
    assert locate({"items": items}) == {"data": items}


def test_envelope_requires_data_item_shape():
    with pytest.raises(StructureError, match="not found"):
        locate({"items": {"title": {"label": "no dataType"}}})
    with pytest.raises(StructureError, match="not found"):
        locate({"items": {}})


def test_marker_takes_precedence_over_envelope():
    element = {"states": {}}
    doc = {"items": {"t": {"dataType": "text"}}, "x": {"editorElement": element}}
    assert locate(doc) is element


def test_find_marker_owner_returns_none_when_absent():
    assert find_marker_owner({"a": [{"b": 1}]}) is None
