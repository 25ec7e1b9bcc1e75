"""Tagged OpenAPI "Any" values used for enum members, defaults and extensions."""
import base64
from datetime import date, datetime
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field, StrictBool, StrictBytes, StrictInt, StrictStr

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


class AnyValueBase(BaseModel):
    """Common base for all Any value variants. Instances are immutable."""
    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    def to_primitive(self) -> Any:
        """Returns the plain JSON-compatible value for rendering."""
        raise NotImplementedError


class AnyNull(AnyValueBase):
    kind: Literal["null"] = "null"

    def to_primitive(self) -> Any:
        return None

class AnyBoolean(AnyValueBase):
    kind: Literal["boolean"] = "boolean"
    value: StrictBool

    def to_primitive(self) -> Any:
        return self.value

class AnyString(AnyValueBase):
    kind: Literal["string"] = "string"
    value: StrictStr

    def to_primitive(self) -> Any:
        return self.value

class AnyByte(AnyValueBase):
    kind: Literal["byte"] = "byte"
    value: StrictInt = Field(ge=0, le=255)

    def to_primitive(self) -> Any:
        return self.value

class AnyInteger(AnyValueBase):
    """32-bit signed integer."""
    kind: Literal["integer"] = "integer"
    value: StrictInt = Field(ge=INT32_MIN, le=INT32_MAX)

    def to_primitive(self) -> Any:
        return self.value

class AnyLong(AnyValueBase):
    """64-bit signed integer."""
    kind: Literal["long"] = "long"
    value: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX)

    def to_primitive(self) -> Any:
        return self.value

class AnyFloat(AnyValueBase):
    """Single precision float. The value is expected to be float32-representable."""
    kind: Literal["float"] = "float"
    value: float

    def to_primitive(self) -> Any:
        return self.value

class AnyDouble(AnyValueBase):
    kind: Literal["double"] = "double"
    value: float

    def to_primitive(self) -> Any:
        return self.value

class AnyDate(AnyValueBase):
    kind: Literal["date"] = "date"
    value: date

    def to_primitive(self) -> Any:
        return self.value.isoformat()

class AnyDateTime(AnyValueBase):
    kind: Literal["date-time"] = "date-time"
    value: datetime

    def to_primitive(self) -> Any:
        return self.value.isoformat()

class AnyBinary(AnyValueBase):
    kind: Literal["binary"] = "binary"
    value: StrictBytes

    def to_primitive(self) -> Any:
        # Rendered documents are text, so raw bytes travel base64-encoded
        return base64.b64encode(self.value).decode("ascii")

class AnyArray(AnyValueBase):
    kind: Literal["array"] = "array"
    elements: List["AnyValue"] = Field(default_factory=list)

    def to_primitive(self) -> Any:
        return [element.to_primitive() for element in self.elements]

class AnyObject(AnyValueBase):
    kind: Literal["object"] = "object"
    members: Dict[str, "AnyValue"] = Field(default_factory=dict)

    def to_primitive(self) -> Any:
        return {key: member.to_primitive() for key, member in self.members.items()}


AnyValue = Annotated[
    Union[
        AnyNull,
        AnyBoolean,
        AnyString,
        AnyByte,
        AnyInteger,
        AnyLong,
        AnyFloat,
        AnyDouble,
        AnyDate,
        AnyDateTime,
        AnyBinary,
        AnyArray,
        AnyObject,
    ],
    Field(discriminator="kind"),
]

AnyArray.model_rebuild()
AnyObject.model_rebuild()
