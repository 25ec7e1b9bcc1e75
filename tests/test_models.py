"""Tests for the OpenAPI and Any value models."""
from datetime import date

import pytest
from pydantic import TypeAdapter, ValidationError

from openapi_reflect.models import (
    AnyArray,
    AnyBinary,
    AnyBoolean,
    AnyByte,
    AnyDate,
    AnyInteger,
    AnyLong,
    AnyNull,
    AnyObject,
    AnyString,
    AnyValue,
    OpenApiMediaType,
    OpenApiParameter,
    OpenApiResponse,
    OpenApiSchema,
    ParameterLocation,
)


def test_any_integer_range_is_enforced() -> None:
    AnyInteger(value=2 ** 31 - 1)
    with pytest.raises(ValidationError):
        AnyInteger(value=2 ** 31)
    with pytest.raises(ValidationError):
        AnyLong(value=2 ** 63)
    with pytest.raises(ValidationError):
        AnyByte(value=256)


def test_any_values_are_strict() -> None:
    with pytest.raises(ValidationError):
        AnyBoolean(value=1)
    with pytest.raises(ValidationError):
        AnyString(value=5)


def test_any_values_are_frozen() -> None:
    value = AnyString(value="a")
    with pytest.raises(ValidationError):
        value.value = "b"


def test_any_value_discriminator() -> None:
    adapter = TypeAdapter(AnyValue)

    assert adapter.validate_python({"kind": "long", "value": 7}) == AnyLong(value=7)
    assert adapter.validate_python({"kind": "null"}) == AnyNull()


def test_any_value_primitives() -> None:
    value = AnyObject(members={
        "tags": AnyArray(elements=[AnyString(value="a"), AnyNull()]),
        "born": AnyDate(value=date(2000, 2, 29)),
        "blob": AnyBinary(value=b"hi"),
    })

    assert value.to_primitive() == {"tags": ["a", None], "born": "2000-02-29", "blob": "aGk="}


def test_schema_to_openapi_for_collections() -> None:
    array = OpenApiSchema(type="array", items=OpenApiSchema(type="string"))
    mapping = OpenApiSchema(type="object", additional_properties=OpenApiSchema(type="integer", format="int32"))

    assert array.to_openapi() == {"type": "array", "items": {"type": "string"}}
    assert mapping.to_openapi() == {"type": "object", "additionalProperties": {"type": "integer", "format": "int32"}}


def test_schema_to_openapi_flattens_extensions() -> None:
    schema = OpenApiSchema(
        type="string",
        read_only=True,
        default=AnyString(value="x"),
        extensions={"x-ms-visibility": AnyString(value="internal")},
    )

    assert schema.to_openapi() == {
        "type": "string",
        "readOnly": True,
        "default": "x",
        "x-ms-visibility": "internal",
    }


def test_schema_accepts_aliases() -> None:
    schema = OpenApiSchema.model_validate({"type": "string", "maxLength": 4, "readOnly": True})

    assert schema.max_length == 4
    assert schema.read_only is True


def test_schema_forbids_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        OpenApiSchema.model_validate({"type": "string", "oneOf": []})


def test_parameter_to_openapi() -> None:
    parameter = OpenApiParameter(
        name="id",
        location=ParameterLocation.QUERY,
        description="Identifier",
        required=True,
        schema_=OpenApiSchema(type="string", format="uuid"),
    )

    assert parameter.to_openapi() == {
        "name": "id",
        "in": "query",
        "description": "Identifier",
        "required": True,
        "schema": {"type": "string", "format": "uuid"},
    }


def test_response_to_openapi() -> None:
    response = OpenApiResponse(
        description="Payload of Thing",
        content={"application/json": OpenApiMediaType(schema_=OpenApiSchema(type="object"))},
        extensions={"x-ms-summary": AnyString(value="A thing")},
    )

    assert response.to_openapi() == {
        "description": "Payload of Thing",
        "content": {"application/json": {"schema": {"type": "object"}}},
        "x-ms-summary": "A thing",
    }
