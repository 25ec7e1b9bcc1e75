"""
Pydantic models for openapi_reflect.
"""
from .any_value import (
    AnyArray,
    AnyBinary,
    AnyBoolean,
    AnyByte,
    AnyDate,
    AnyDateTime,
    AnyDouble,
    AnyFloat,
    AnyInteger,
    AnyLong,
    AnyNull,
    AnyObject,
    AnyString,
    AnyValue,
)
from .common import (
    SUMMARY_EXTENSION,
    VISIBILITY_EXTENSION,
    BasePydanticModel,
    OpenApiVisibilityType,
    OutputFormat,
    ParameterLocation,
)
from .json_schema import JsonSchemaDocument
from .openapi import OpenApiMediaType, OpenApiParameter, OpenApiResponse, OpenApiSchema

__all__ = [
    "AnyArray",
    "AnyBinary",
    "AnyBoolean",
    "AnyByte",
    "AnyDate",
    "AnyDateTime",
    "AnyDouble",
    "AnyFloat",
    "AnyInteger",
    "AnyLong",
    "AnyNull",
    "AnyObject",
    "AnyString",
    "AnyValue",
    "BasePydanticModel",
    "JsonSchemaDocument",
    "OpenApiMediaType",
    "OpenApiParameter",
    "OpenApiResponse",
    "OpenApiSchema",
    "OpenApiVisibilityType",
    "OutputFormat",
    "ParameterLocation",
    "SUMMARY_EXTENSION",
    "VISIBILITY_EXTENSION",
]
