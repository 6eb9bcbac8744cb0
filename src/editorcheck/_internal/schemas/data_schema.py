"""Schema for the ``data`` field: a map of data item name -> DataItem."""

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BeforeValidator, Field, StrictBool, StringConstraints, field_validator

from .common import Guid, Name100, Number, SchemaModel, Text, non_empty

DataType = Literal[
    "UNKNOWN_DataType",
    "text",
    "textEnum",
    "number",
    "booleanValue",
    "a11y",
    "link",
    "image",
    "video",
    "vectorArt",
    "audio",
    "schema",  # deprecated
    "localDate",
    "localTime",
    "localDateTime",
    "webUrl",
    "email",
    "phone",
    "hostname",
    "regex",
    "guid",
    "richText",
    "container",
    "arrayItems",
    "direction",
    "menuItems",
    "data",
]

A11yAttribute = Literal[
    "Unknown_AriaAttributes",
    "tabIndex",
    "ariaLevel",
    "ariaExpanded",
    "ariaDisabled",
    "ariaAtomic",
    "ariaHidden",
    "ariaBusy",
    "multiline",
    "ariaAutocomplete",
    "ariaPressed",
    "ariaHaspopup",
    "ariaRelevant",
    "role",
    "ariaLive",
    "ariaCurrent",
    "ariaLabel",
    "ariaRoledescription",
    "ariaDescribedby",
    "ariaLabelledby",
    "ariaErrormessage",
    "ariaOwns",
    "ariaControls",
    "tag",
    "ariaMultiline",
    "ariaInvalid",
]

LinkType = Literal[
    "UNKNOWN_LinkType",
    "externalLink",
    "anchorLink",
    "emailLink",
    "phoneLink",
    "dynamicPageLink",
    "pageLink",
    "whatsAppLink",
    "documentLink",
    "popupLink",
    "addressLink",
    "edgeAnchorLinks",
    "loginToWixLink",
]

RichTextAbility = Literal[
    "UNKNOWN_RichTextAbilities",
    "font",
    "fontFamily",
    "fontSize",
    "fontStyle",
    "fontWeight",
    "textDecoration",
    "color",
    "backgroundColor",
    "letterSpacing",
    "textAlign",
    "direction",
    "marginStart",
    "marginEnd",
    "bulletedList",
    "numberedList",
    "seoTag",
]

ContainerType = Literal["UNKNOWN_CONTAINER_TYPE", "simple", "slot", "placeholder", "template"]


# Per-kind configs

class TextConfig(SchemaModel):
    max_length: Optional[Number] = None
    min_length: Optional[Number] = None
    regex_pattern: Optional[Text] = None  # deprecated, use pattern
    pattern: Optional[Text] = None


class TextEnumOption(SchemaModel):
    value: Text
    display_name: Text


class TextEnumConfig(SchemaModel):
    options: List[TextEnumOption]


class NumberConfig(SchemaModel):
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    multiple_of: Optional[Number] = None


class A11yConfig(SchemaModel):
    attributes: List[A11yAttribute]


class LinkConfig(SchemaModel):
    link_types: List[LinkType]


class RichTextConfig(SchemaModel):
    abilities: List[RichTextAbility]


class MediaConfig(SchemaModel):
    """Image, video and vector-art configs share one shape."""
    category: Text


# Containers

class ContainerBehaviors(SchemaModel):
    selectable: Optional[StrictBool] = None


class ContainerLayout(SchemaModel):
    resize_direction: Text


class StyleItemOverrides(SchemaModel):
    disable_editing: Optional[StrictBool] = None
    display_name: Optional[Text] = None


class ContainerStyleOverrides(SchemaModel):
    border: Optional[StyleItemOverrides] = None
    border_radius: Optional[StyleItemOverrides] = None
    shadow: Optional[StyleItemOverrides] = None
    background: Optional[StyleItemOverrides] = None


class SimpleContainer(SchemaModel):
    layout: Optional[ContainerLayout] = None
    style: Optional[ContainerStyleOverrides] = None
    behaviors: Optional[ContainerBehaviors] = None
    display_name: Optional[Text] = None


class SlotConfig(SchemaModel):
    slot_id: Guid


class PlaceholderConfig(SchemaModel):
    placeholder_id: Guid


class ContainerConfig(SchemaModel):
    selector: Annotated[str, StringConstraints(strict=True, min_length=2, max_length=100)]
    container_type: ContainerType
    simple: Optional[SimpleContainer] = None
    slot: Optional[SlotConfig] = None
    placeholder: Optional[PlaceholderConfig] = None


# Data items

class _DataItemBase(SchemaModel):
    data_type: DataType
    display_name: Optional[Name100] = None
    default_value: Any = None
    deprecated: Optional[StrictBool] = None

    text: Optional[TextConfig] = None
    text_enum: Optional[TextEnumConfig] = None
    number: Optional[NumberConfig] = None
    a11y: Optional[A11yConfig] = Field(default=None, alias="a11y")  # to_camel would yield "a11Y"
    link: Optional[LinkConfig] = None
    schema_: Any = Field(default=None, alias="schema")  # deprecated
    container: Optional[ContainerConfig] = None
    rich_text: Optional[RichTextConfig] = None
    image: Optional[MediaConfig] = None
    video: Optional[MediaConfig] = None
    vector_art: Optional[MediaConfig] = None


class NestedDataItem(_DataItemBase):
    """A data item nested under ``arrayItems.data``.

    Recursion stops here: a nested item's own ``arrayItems`` is accepted as
    any mapping without further schema evaluation.
    """
    array_items: Optional[Dict[str, Any]] = None


class ArrayItemsConfig(SchemaModel):
    data: Optional[Dict[str, NestedDataItem]] = None
    data_item: Any = None
    max_size: Optional[Number] = None

    @field_validator("data", mode="before")
    @classmethod
    def validate_data(cls, v: Any) -> Any:
        """Nested data map must be non-empty and hold no empty objects."""
        if not isinstance(v, dict):
            return v
        if not v:
            raise ValueError("Data object cannot be empty")
        if any(isinstance(item, dict) and not item for item in v.values()):
            raise ValueError("Items under arrayItems/data cannot be empty objects")
        return v


class DataItem(_DataItemBase):
    """A data item: a ``dataType`` tag plus the optional config for that kind."""
    array_items: Optional[ArrayItemsConfig] = None


DataItems = Annotated[Dict[str, DataItem], BeforeValidator(non_empty("Data"))]
