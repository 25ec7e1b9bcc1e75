"""
Schema generation module for openapi_reflect.

Translates Python types into OpenAPI Schema Objects, imports generic JSON
Schema documents and converts JSON values into OpenAPI Any values.
"""
from .attributes import (
    JsonConverter,
    JsonIgnore,
    OpenApiSchemaVisibility,
    ParameterMetadata,
    ResponseBodyMetadata,
    StringEnumConverter,
    get_openapi_parameters,
    get_openapi_response_bodies,
    json_converter,
    openapi_parameter,
    openapi_response_body,
)
from .interop import import_json_schema, to_any
from .naming import NamingStrategy, camel_case, default_naming, get_naming_strategy, kebab_case, snake_case
from .operations import to_openapi_parameter, to_openapi_response
from .rendering import render
from .translator import translate
from .type_descriptor import PropertyDescriptor, TypeDescriptor, describe
from .type_mapping import Double, Float, Int32, Int64

__all__ = [
    "Double",
    "Float",
    "Int32",
    "Int64",
    "JsonConverter",
    "JsonIgnore",
    "NamingStrategy",
    "OpenApiSchemaVisibility",
    "ParameterMetadata",
    "PropertyDescriptor",
    "ResponseBodyMetadata",
    "StringEnumConverter",
    "TypeDescriptor",
    "camel_case",
    "default_naming",
    "describe",
    "get_naming_strategy",
    "get_openapi_parameters",
    "get_openapi_response_bodies",
    "import_json_schema",
    "json_converter",
    "kebab_case",
    "openapi_parameter",
    "openapi_response_body",
    "render",
    "snake_case",
    "to_any",
    "to_openapi_parameter",
    "to_openapi_response",
    "translate",
]
