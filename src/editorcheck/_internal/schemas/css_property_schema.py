"""Schema for ``cssProperties`` and ``cssCustomProperties``.

Both fields map a property name to a CssPropertyItem. Items keep unknown
keys so the ``statesDefaultValues`` invariant can see the whole tree.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BeforeValidator, ConfigDict

from .common import Name100, SchemaModel, Text, non_empty
from .data_schema import NumberConfig

DisplayValue = Literal[
    "none",
    "block",
    "inline",
    "inline-block",
    "flex",
    "inline-flex",
    "grid",
    "inline-grid",
    "contents",
]

BackgroundMode = Literal["color", "image", "gradient", "video"]


class DisplayOptions(SchemaModel):
    display_values: Optional[List[DisplayValue]] = None


class BackgroundOptions(SchemaModel):
    background_modes: Optional[List[BackgroundMode]] = None


class FilterLists(SchemaModel):
    show: Optional[List[Text]] = None
    hide: Optional[List[Text]] = None


class CssPropertyItem(SchemaModel):
    """One CSS (custom) property description. Every part is optional."""
    display_name: Optional[Name100] = None
    default_value: Any = None
    states_default_values: Optional[Dict[str, Any]] = None
    display: Optional[DisplayOptions] = None
    filters: Optional[FilterLists] = None
    background: Optional[BackgroundOptions] = None
    number: Optional[NumberConfig] = None

    model_config = ConfigDict(extra="allow")


CssProperties = Annotated[Dict[str, CssPropertyItem], BeforeValidator(non_empty("CSS properties"))]
CssCustomProperties = Annotated[
    Dict[str, CssPropertyItem],
    BeforeValidator(non_empty("CSS custom properties")),
]
