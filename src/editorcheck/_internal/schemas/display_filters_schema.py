"""Schema for the ``displayFilters`` field.

Each filter group is a show/hide pair. Exactly one of the two lists must be
non-empty; the ``actions`` group additionally restricts entries to the known
editor action names.
"""

from typing import Annotated, List, Optional

from pydantic import BeforeValidator, model_validator

from .common import SchemaModel, Text, non_empty

VALID_ACTION_NAMES = ("delete", "duplicate", "copy", "paste", "cut", "undo", "redo")

MUTUALLY_EXCLUSIVE_MESSAGE = (
    "Show and hide filters are mutually exclusive - only one can be used at a time"
)
MISSING_VALUES_MESSAGE = "At least one of show or hide must be provided with values"


class FilterGroup(SchemaModel):
    show: Optional[List[Text]] = None
    hide: Optional[List[Text]] = None

    @model_validator(mode="after")
    def validate_show_hide(self):
        """Show and hide are mutually exclusive, and one of them is required."""
        has_show = bool(self.show)
        has_hide = bool(self.hide)
        if has_show and has_hide:
            raise ValueError(MUTUALLY_EXCLUSIVE_MESSAGE)
        if not has_show and not has_hide:
            raise ValueError(MISSING_VALUES_MESSAGE)
        return self


class ActionsFilterGroup(FilterGroup):

    @model_validator(mode="after")
    def validate_action_names(self):
        """Every listed action must be a known editor action."""
        entries = self.show or self.hide or []
        invalid = [name for name in entries if name not in VALID_ACTION_NAMES]
        if invalid:
            raise ValueError(f"Invalid action names found: {', '.join(invalid)}")
        return self


class DisplayFiltersModel(SchemaModel):
    elements: Optional[FilterGroup] = None
    style: Optional[FilterGroup] = None
    data: Optional[FilterGroup] = None
    custom_actions: Optional[FilterGroup] = None
    actions: Optional[ActionsFilterGroup] = None
    css_properties: Optional[FilterGroup] = None
    css_custom_properties: Optional[FilterGroup] = None


DisplayFilters = Annotated[DisplayFiltersModel, BeforeValidator(non_empty("Display filters"))]
