"""Generic JSON Schema document model, the input of the schema importer."""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class JsonSchemaDocument(BaseModel):
    """A parsed JSON Schema (draft 4 to 7 vocabulary subset).

    Keywords outside the modelled vocabulary are ignored. `items` is always
    exposed as a list: a single schema becomes a one-element list. Boolean
    subschemas in `items` and `properties` are read as `true` -> `{}` (any
    value) while `false` entries are dropped.
    """
    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
    }

    type: Optional[Union[str, List[str]]] = None
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    default: Optional[Any] = None
    enum: Optional[List[Any]] = None
    read_only: Optional[bool] = Field(default=None, alias="readOnly")
    maximum: Optional[Union[int, float]] = None
    minimum: Optional[Union[int, float]] = None
    exclusive_maximum: Optional[Union[bool, int, float]] = Field(default=None, alias="exclusiveMaximum")
    exclusive_minimum: Optional[Union[bool, int, float]] = Field(default=None, alias="exclusiveMinimum")
    max_items: Optional[int] = Field(default=None, alias="maxItems")
    min_items: Optional[int] = Field(default=None, alias="minItems")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    min_length: Optional[int] = Field(default=None, alias="minLength")
    pattern: Optional[str] = None
    properties: Optional[Dict[str, "JsonSchemaDocument"]] = None
    items: Optional[List["JsonSchemaDocument"]] = None
    additional_properties: Optional["JsonSchemaDocument"] = Field(default=None, alias="additionalProperties")

    @field_validator("items", mode="before")
    @classmethod
    def wrap_single_items(cls, v: Any) -> Any:
        if v is False:
            return None
        if isinstance(v, (bool, dict)):
            v = [v]
        if isinstance(v, list):
            return _open_subschemas(v)
        return v

    @field_validator("properties", mode="before")
    @classmethod
    def open_boolean_properties(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {name: {} if schema is True else schema for name, schema in v.items() if schema is not False}
        return v

    @field_validator("additional_properties", mode="before")
    @classmethod
    def drop_boolean_additional_properties(cls, v: Any) -> Any:
        # `additionalProperties: true/false` carries no nested schema
        if isinstance(v, bool):
            return None
        return v


JsonSchemaDocument.model_rebuild()


def _open_subschemas(schemas: List[Any]) -> List[Any]:
    # `true` accepts any value; `false` accepts none and has no OpenAPI 3.0 form
    return [{} if schema is True else schema for schema in schemas if schema is not False]
