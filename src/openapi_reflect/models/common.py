from enum import Enum

from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
    }

class OpenApiVisibilityType(str, Enum):
    IMPORTANT = "important"
    ADVANCED = "advanced"
    INTERNAL = "internal"

    @property
    def display_name(self) -> str:
        return self.value

class ParameterLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"

class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"

# Extension keys stamped into schema/response extension maps
VISIBILITY_EXTENSION = "x-ms-visibility"
SUMMARY_EXTENSION = "x-ms-summary"
