"""Schema for the ``states`` field: a map of state name -> ElementState."""

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BeforeValidator, ConfigDict

from .common import Filter80, Name100, SchemaModel, non_empty

NativeStateType = Literal[
    "UNKNOWN_NativeStateType",
    "hover",
    "focus",
    "disabled",
    "invalid",
]


class StateDisplayFilter(SchemaModel):
    hide: Optional[List[Filter80]] = None
    show: Optional[List[Filter80]] = None


class StateDisplayFilters(SchemaModel):
    elements: Optional[StateDisplayFilter] = None
    style: Optional[StateDisplayFilter] = None  # deprecated
    data: Optional[StateDisplayFilter] = None
    custom_actions: Optional[StateDisplayFilter] = None
    actions: Optional[StateDisplayFilter] = None
    css_properties: Optional[StateDisplayFilter] = None
    css_custom_properties: Optional[StateDisplayFilter] = None


class ElementState(SchemaModel):
    """An interaction state.

    ``pseudoClass`` is optional: an omitted enum decodes to the unknown
    member, as in proto3 JSON.
    """
    display_name: Optional[Name100] = None
    class_name: Optional[Name100] = None
    pseudo_class: Optional[NativeStateType] = None
    props: Optional[Dict[str, Any]] = None
    display_filters: Optional[StateDisplayFilters] = None

    model_config = ConfigDict(extra="allow")


States = Annotated[Dict[str, ElementState], BeforeValidator(non_empty("States"))]
