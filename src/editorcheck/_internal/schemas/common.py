"""Common building blocks for element field schemas."""

import re
from typing import Annotated, Any, Callable, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainValidator,
    StringConstraints,
    WithJsonSchema,
)
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """Base for element schema structs.

    JSON keys are camelCase; Python attributes are snake_case. Unknown keys
    are dropped on decode (struct semantics) unless a subclass opts into
    ``extra="allow"``.
    """
    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")


def non_empty(label: str) -> Callable[[Any], Any]:
    """Before-validator rejecting an empty mapping or sequence.

    Non-collections pass through so the wrapped type reports its own
    type error.
    """
    def _check(value: Any) -> Any:
        if isinstance(value, (dict, list)) and not value:
            raise ValueError(f"{label} object cannot be empty")
        return value
    return _check


def _check_number(value: Any) -> Union[int, float]:
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a number")
    return value


# JSON number: accepts int or float, keeps the input type (no int->float widening)
Number = Annotated[
    Union[int, float],
    PlainValidator(_check_number),
    WithJsonSchema({"type": "number"}),
]

_GUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)


def _check_guid(value: str) -> str:
    if not _GUID_RE.match(value):
        raise ValueError(f"Expected a GUID (xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx), got '{value}'")
    return value


Guid = Annotated[str, StringConstraints(strict=True), AfterValidator(_check_guid)]

Text = Annotated[str, StringConstraints(strict=True)]
Name100 = Annotated[str, StringConstraints(strict=True, max_length=100)]
Filter80 = Annotated[str, StringConstraints(strict=True, max_length=80)]
