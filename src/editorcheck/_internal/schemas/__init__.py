"""Pydantic schemas for the leaf constraints of each element field.

These modules only describe shapes. Cross-field invariants that need a
walk over the decoded tree live with the catalog validators.
"""

from .data_schema import DataItem, DataItems
from .css_property_schema import CssPropertyItem, CssProperties, CssCustomProperties
from .state_schema import ElementState, States
from .display_filters_schema import DisplayFilters, DisplayFiltersModel, VALID_ACTION_NAMES

__all__ = [
    "DataItem",
    "DataItems",
    "CssPropertyItem",
    "CssProperties",
    "CssCustomProperties",
    "ElementState",
    "States",
    "DisplayFilters",
    "DisplayFiltersModel",
    "VALID_ACTION_NAMES",
]
