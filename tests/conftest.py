"""Pytest configuration and shared fixtures.

No sys.path hacks - tests should import from installed editorcheck package.
"""

import copy

import pytest

from editorcheck.kernel.catalog import default_catalog

VALID_ELEMENT = {
    "data": {
        "title": {"dataType": "text", "displayName": "Title", "text": {"maxLength": 80}},
        "cta": {"dataType": "link", "link": {"linkTypes": ["externalLink", "pageLink"]}},
    },
    "cssProperties": {
        "color": {"defaultValue": "red", "statesDefaultValues": {"hover": "blue"}},
    },
    "cssCustomProperties": {
        "--gap": {"number": {"minimum": 0}},
    },
    "states": {
        "hover": {"pseudoClass": "hover", "props": {"label": "Hovered"}},
    },
    "displayFilters": {
        "actions": {"hide": ["delete"]},
        "elements": {"show": ["title"]},
    },
}


@pytest.fixture
def catalog():
    """The built-in schema catalog."""
    return default_catalog()


@pytest.fixture
def valid_element():
    """An element document whose five fields are all valid (fresh copy per test)."""
    return copy.deepcopy(VALID_ELEMENT)
