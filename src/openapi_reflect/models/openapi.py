"""Module for OpenAPI document models produced by the schema generators."""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .any_value import AnyValue
from .common import BasePydanticModel, ParameterLocation

# (attribute, OpenAPI key) pairs copied as-is by the projections below
_SCALAR_FIELDS = (
    ("type", "type"),
    ("format", "format"),
    ("title", "title"),
    ("description", "description"),
    ("maximum", "maximum"),
    ("exclusive_maximum", "exclusiveMaximum"),
    ("minimum", "minimum"),
    ("exclusive_minimum", "exclusiveMinimum"),
    ("max_length", "maxLength"),
    ("min_length", "minLength"),
    ("pattern", "pattern"),
    ("max_items", "maxItems"),
    ("min_items", "minItems"),
)


class OpenApiSchema(BaseModel):
    """OpenAPI Schema Object.

    Nodes are built by a single writer (the translator or the JSON Schema
    importer) and are not expected to be mutated once returned.
    """
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

    type: Optional[str] = None
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    nullable: bool = False
    read_only: bool = Field(default=False, alias="readOnly")
    enum: Optional[List[AnyValue]] = None
    default: Optional[AnyValue] = None
    maximum: Optional[Union[int, float]] = None
    exclusive_maximum: Optional[bool] = Field(default=None, alias="exclusiveMaximum")
    minimum: Optional[Union[int, float]] = None
    exclusive_minimum: Optional[bool] = Field(default=None, alias="exclusiveMinimum")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    min_length: Optional[int] = Field(default=None, alias="minLength")
    pattern: Optional[str] = None
    max_items: Optional[int] = Field(default=None, alias="maxItems")
    min_items: Optional[int] = Field(default=None, alias="minItems")
    properties: Optional[Dict[str, "OpenApiSchema"]] = None
    additional_properties: Optional["OpenApiSchema"] = Field(default=None, alias="additionalProperties")
    items: Optional["OpenApiSchema"] = None
    any_of: Optional[List["OpenApiSchema"]] = Field(default=None, alias="anyOf")
    extensions: Dict[str, AnyValue] = Field(default_factory=dict)

    def _copy_scalars(self, doc: Dict[str, Any]) -> None:
        for attr, key in _SCALAR_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                doc[key] = value
        if self.read_only:
            doc["readOnly"] = True
        if self.enum is not None:
            doc["enum"] = [member.to_primitive() for member in self.enum]
        if self.default is not None:
            doc["default"] = self.default.to_primitive()

    def to_openapi(self) -> Dict[str, Any]:
        """Projects the node into an OpenAPI 3 Schema Object dictionary."""
        doc: Dict[str, Any] = {}
        self._copy_scalars(doc)
        if self.nullable:
            doc["nullable"] = True
        if self.items is not None:
            doc["items"] = self.items.to_openapi()
        if self.any_of is not None:
            doc["anyOf"] = [schema.to_openapi() for schema in self.any_of]
        # An empty map is kept: object schemas always list their properties
        if self.properties is not None:
            doc["properties"] = {name: schema.to_openapi() for name, schema in self.properties.items()}
        if self.additional_properties is not None:
            doc["additionalProperties"] = self.additional_properties.to_openapi()
        for key, value in self.extensions.items():
            doc[key] = value.to_primitive()
        return doc

    def to_json_schema(self) -> Dict[str, Any]:
        """Projects the node back into the generic JSON Schema vocabulary.

        `any_of` becomes an `items` list, which is how the importer reads it.
        OpenAPI-only fields (nullable, extensions) have no counterpart.
        """
        doc: Dict[str, Any] = {}
        self._copy_scalars(doc)
        if self.any_of is not None:
            doc["items"] = [schema.to_json_schema() for schema in self.any_of]
        elif self.items is not None:
            doc["items"] = [self.items.to_json_schema()]
        if self.properties is not None:
            doc["properties"] = {name: schema.to_json_schema() for name, schema in self.properties.items()}
        if self.additional_properties is not None:
            doc["additionalProperties"] = self.additional_properties.to_json_schema()
        return doc


class OpenApiParameter(BasePydanticModel):
    """OpenAPI Parameter Object."""
    name: str
    location: ParameterLocation = Field(default=ParameterLocation.PATH, alias="in")
    description: Optional[str] = None
    required: bool = False
    schema_: OpenApiSchema = Field(alias="schema")

    def to_openapi(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {"name": self.name, "in": ParameterLocation(self.location).value}
        if self.description:
            doc["description"] = self.description
        doc["required"] = self.required
        doc["schema"] = self.schema_.to_openapi()
        return doc

class OpenApiMediaType(BasePydanticModel):
    """OpenAPI Media Type Object."""
    schema_: OpenApiSchema = Field(alias="schema")

    def to_openapi(self) -> Dict[str, Any]:
        return {"schema": self.schema_.to_openapi()}

class OpenApiResponse(BasePydanticModel):
    """OpenAPI Response Object."""
    description: str
    content: Dict[str, OpenApiMediaType] = Field(default_factory=dict)
    extensions: Dict[str, AnyValue] = Field(default_factory=dict)

    def to_openapi(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {"description": self.description}
        if self.content:
            doc["content"] = {media: media_type.to_openapi() for media, media_type in self.content.items()}
        for key, value in self.extensions.items():
            doc[key] = value.to_primitive()
        return doc


OpenApiSchema.model_rebuild()
